#!/usr/bin/env python3
# -*- coding: utf-8 -*-
import os
import sys
import logging
import platform
import subprocess
import click
from devlocker import __version__
from devlocker.config import load_config
from devlocker.error import ErrorLockDevice, ErrorOpenDevicePermissionDenied
from devlocker.locker import DeviceLocker
from devlocker.serialport import SerialPort
from devlocker.utils import get_devices, select_device

LOG_FORMAT = '%(asctime)s %(levelname)s: %(message)s'


@click.group()
@click.option('--device', '-d', type=str, help='Device path.')
@click.option('--debug', is_flag=True, help='Show debug messages.')
@click.version_option(version=__version__)
@click.pass_context
def cli(ctx, device=None, debug=False):
    '''Device Locker Tool.'''
    config = load_config()
    logging.basicConfig(level=logging.DEBUG if debug else config['log_level'], format=LOG_FORMAT)
    ctx.obj['device'] = device
    ctx.obj['config'] = config


@cli.command('devices')
@click.option('-v', '--verbose', is_flag=True, help='Show more messages.')
@click.option('-s', '--include-links', is_flag=True, help='Include entries that are symlinks to real devices.')
def command_devices(verbose=False, include_links=False):
    '''Print available devices.'''
    for port, desc, hwid in get_devices(include_links):
        sys.stdout.write("{:20}\n".format(port))
        if verbose:
            sys.stdout.write("    desc: {}\n".format(desc))
            sys.stdout.write("    hwid: {}\n".format(hwid))


def _lock_tips():
    click.echo("TIP: Maybe another service is using the port - you need to stop it first.")
    if platform.system() == 'Linux':
        click.echo("Try this command to see which process holds it:")
        click.echo("fuser -v <device>")


def _permission_tips():
    if platform.system() != 'Linux':
        return
    try:
        groups = subprocess.check_output('groups').decode().strip().split()
    except (OSError, subprocess.CalledProcessError):
        return
    if 'dialout' not in groups:
        click.echo("TIP: Try add permissions on serial port")
        click.echo("Try this command and logout and login back:")
        click.echo("sudo usermod -a -G dialout $USER")


@cli.command('check')
@click.option('-d', '--device', type=str, help='Device path.')
@click.option('--baudrate', type=int, help='Baudrate (default from config).')
@click.option('--no-lock', is_flag=True, help='Do not lock the device.')
@click.pass_context
def command_check(ctx, device=None, baudrate=None, no_lock=False):
    '''Open and close device.'''
    if device is None:
        device = ctx.obj['device']

    config = ctx.obj['config']
    device = select_device(device)

    port = SerialPort(device,
                      baudrate=baudrate or config['baudrate'],
                      lock=config['lock'] and not no_lock)

    try:
        locker = DeviceLocker.from_device(port)

    except ErrorLockDevice as e:
        click.echo(e)
        _lock_tips()
        sys.exit(1)

    except ErrorOpenDevicePermissionDenied as e:
        click.echo(e)
        _permission_tips()
        sys.exit(1)

    click.echo("Open %s " % device, nl=False)
    locker.close()
    click.secho('OK', fg='green')


@cli.command('help')
@click.argument('command', required=False)
@click.pass_context
def command_help(ctx, command):
    '''Show help.'''
    cmd = cli.get_command(ctx, command)

    if cmd is None:
        cmd = cli

    click.echo(cmd.get_help(ctx))


def main():
    '''Application entry point.'''
    try:
        cli(obj={})
    except KeyboardInterrupt:
        pass
    except Exception as e:
        click.secho(str(e), err=True, fg='red')
        if os.getenv('DEBUG', False):
            raise e
        sys.exit(1)


if __name__ == '__main__':
    main()
