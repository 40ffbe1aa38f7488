#!/usr/bin/env python3
# -*- coding: utf-8 -*-
import os
import sys
import re
import click


def get_devices(include_links=False):
    if os.name == 'nt' or sys.platform == 'win32':
        from serial.tools.list_ports_windows import comports
        return sorted(comports())

    from serial.tools.list_ports_posix import comports
    return sorted(comports(include_links=include_links))


def select_device(device):
    if device is not None:
        return device

    ports = get_devices()
    if not ports:
        raise Exception("No device")

    if len(ports) == 1:
        return ports[0][0]

    for i, port in enumerate(ports):
        sn = ""
        g = re.search(r"SER=([^\s]*)", port[2])
        if g:
            sn = g.group(1)
        click.echo("%i: %s %s" % (i, port[0], sn), err=True)
    d = click.prompt('Please choose device (line number)')

    for port in ports:
        if port[0] == d:
            return port[0]

    try:
        return ports[int(d)][0]
    except (ValueError, IndexError):
        raise Exception("Unknown device")
