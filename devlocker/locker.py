#!/usr/bin/env python3
# -*- coding: utf-8 -*-
import logging
from . import capability as _capability

__all__ = ["DeviceLocker"]

logger = logging.getLogger(__name__)


class DeviceLocker(object):
    '''Device ownership: opens a device and makes sure it gets closed.

    The device is opened when the locker is created. If ``open_func`` raises,
    the exception propagates unchanged, no locker exists and ``close_func``
    is never called.

    The device is closed either explicitly with :meth:`close`, which raises
    any real close failure to the caller, or when the locker is released,
    in which case failures are only logged as a warning::

        with DeviceLocker.from_device(port) as locker:
            ...

    Explicit close ignores failures that the device kind reports as the
    device being gone (e.g. an unplugged USB device).
    '''

    def __init__(self, device, open_func, close_func, is_gone=None):
        self._device_open = False
        if device is None:
            raise ValueError('device is None')
        if not callable(open_func):
            raise TypeError('open_func is not callable')
        if not callable(close_func):
            raise TypeError('close_func is not callable')
        if is_gone is not None and not callable(is_gone):
            raise TypeError('is_gone is not callable')

        self._device = device
        self._open_func = open_func
        self._close_func = close_func
        self._is_gone = is_gone

        try:
            self._open_func(device)
        except BaseException:
            self._device = None
            raise

        self._device_open = True

    @classmethod
    def from_capability(cls, device, capability):
        return cls(device, capability.open_func, capability.close_func, capability.is_gone)

    @classmethod
    def from_device(cls, device):
        '''Open the device with the capability registered for its type.

        Raises ErrorUnsupportedDevice without opening anything if the type
        is not registered.
        '''
        return cls.from_capability(device, _capability.lookup(device))

    @property
    def device(self):
        return self._device

    @property
    def is_open(self):
        return self._device_open

    def close(self):
        '''Close the device before the locker gets cleaned up.

        Does nothing if the device is already closed. On a close failure the
        exception is raised and the device stays open, so close() may be
        called again.
        '''
        if not self._device_open:
            return

        try:
            self._close_func(self._device)
        except Exception as e:
            if self._is_gone is None or not self._is_gone(e):
                raise
            logger.debug('ignoring: %s', e)

        self._device_open = False

    def _close_quietly(self):
        if not self._device_open:
            return

        self._device_open = False
        try:
            self._close_func(self._device)
        except Exception as e:
            logger.warning('failed to close device: %s', e)

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_value, traceback):
        if exc_type is None:
            self.close()
        else:
            self._close_quietly()

    def __del__(self):
        self._close_quietly()

    def __repr__(self):
        return '<DeviceLocker %r %s>' % (self._device, 'open' if self._device_open else 'closed')
