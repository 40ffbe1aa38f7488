#!/usr/bin/env python3
# -*- coding: utf-8 -*-

__all__ = ["ErrorOpenDevice", "ErrorLockDevice", "ErrorOpenDevicePermissionDenied",
           "ErrorUnsupportedDevice", "ErrorConfig"]


class ErrorOpenDevice(Exception):
    pass


class ErrorOpenDevicePermissionDenied(ErrorOpenDevice):
    pass


class ErrorLockDevice(Exception):
    pass


class ErrorUnsupportedDevice(Exception):
    '''No capability is registered for the type of the device object.'''
    pass


class ErrorConfig(Exception):
    pass
