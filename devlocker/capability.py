#!/usr/bin/env python3
# -*- coding: utf-8 -*-
import errno
import logging
import serial
import usb.core
import usb.util
from .device import Device
from .error import ErrorUnsupportedDevice

__all__ = ["Capability", "register", "unregister", "lookup", "USB", "SERIAL", "DEVICE"]

logger = logging.getLogger(__name__)


class Capability(object):
    '''Open/close pair for one kind of device.

    ``is_gone`` is an optional predicate taking the exception raised by
    ``close_func``. It returns True when the failure only means the device
    is no longer present, so an explicit close may treat it as done. Kinds
    without such a condition leave it as None.

    The usb kind opens a handle without touching the configuration of a
    configured device, so kernel drivers bound to its interfaces are left
    alone. A device with no active configuration is set to its first one.
    '''

    def __init__(self, name, open_func, close_func, is_gone=None):
        self.name = name
        self.open_func = open_func
        self.close_func = close_func
        self.is_gone = is_gone

    def __repr__(self):
        return '<Capability %s>' % self.name


def usb_open(device):
    # opens the handle; only an unconfigured device gets its first configuration
    try:
        device.get_active_configuration()
    except usb.core.USBError:
        device.set_configuration()


def usb_close(device):
    usb.util.dispose_resources(device)


def usb_is_gone(error):
    # pyusb maps LIBUSB_ERROR_NO_DEVICE to ENODEV
    return isinstance(error, usb.core.USBError) and error.errno == errno.ENODEV


def serial_open(ser):
    ser.open()


def serial_close(ser):
    ser.close()


def device_open(device):
    device.open()


def device_close(device):
    device.close()


USB = Capability('usb', usb_open, usb_close, usb_is_gone)
SERIAL = Capability('serial', serial_open, serial_close)
DEVICE = Capability('device', device_open, device_close)

_registry = []


def register(cls, capability):
    for i, (klass, _) in enumerate(_registry):
        if klass is cls:
            _registry[i] = (cls, capability)
            break
    else:
        _registry.append((cls, capability))
    logger.debug('register %s for %s', capability, cls.__name__)


def unregister(cls):
    _registry[:] = [row for row in _registry if row[0] is not cls]


def lookup(device):
    for cls, capability in _registry:
        if isinstance(device, cls):
            return capability

    raise ErrorUnsupportedDevice('device object type not supported: %s' % type(device).__name__)


register(usb.core.Device, USB)
register(serial.Serial, SERIAL)
register(Device, DEVICE)
