#!/usr/bin/env python3
# -*- coding: utf-8 -*-
import errno
import logging
import serial
from .device import Device
from .error import *
try:
    import fcntl
except ImportError:
    fcntl = None

__all__ = ["SerialPort"]

logger = logging.getLogger(__name__)


class SerialPort(Device):
    '''Serial port opened with an exclusive advisory lock.

    The port is not opened in the constructor; use it through a
    DeviceLocker, which calls open() and close(). On POSIX systems the
    character device is locked with flock() so that two tools (e.g. a
    gateway service and a flasher) do not talk to the same port.
    '''

    def __init__(self, device, baudrate=115200, lock=True, **kwargs):
        Device.__init__(self, device)
        self._lock = lock and fcntl is not None
        self._locked = False
        self.ser = serial.Serial(baudrate=baudrate, **kwargs)
        self.ser.port = device

    @property
    def is_open(self):
        return self.ser.is_open

    def open(self):
        logger.debug('open %s', self.name)
        try:
            self.ser.open()
        except serial.SerialException as e:
            if e.errno == errno.EACCES:
                raise ErrorOpenDevicePermissionDenied('Permission denied to open device %s' % self.name)
            raise ErrorOpenDevice('Could not open device %s' % self.name)

        if self._lock:
            try:
                fcntl.flock(self.ser.fileno(), fcntl.LOCK_EX | fcntl.LOCK_NB)
            except (IOError, OSError):
                self.ser.close()
                raise ErrorLockDevice('Could not lock device %s' % self.name)
            self._locked = True

    def close(self):
        if not self.ser.is_open:
            return

        logger.debug('close %s', self.name)

        try:
            if self._locked:
                self._locked = False
                fcntl.flock(self.ser.fileno(), fcntl.LOCK_UN)
        finally:
            self.ser.close()
