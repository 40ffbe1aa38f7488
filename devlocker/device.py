#!/usr/bin/env python3
# -*- coding: utf-8 -*-

__all__ = ["Device"]


class Device(object):
    '''Base class for devices with their own open/close operations.

    Subclasses override open() and close(); both raise on failure. A
    DeviceLocker built with DeviceLocker.from_device() calls them for you.
    '''

    def __init__(self, name=None):
        self.name = name

    def open(self):
        raise NotImplementedError('%s does not implement open()' % type(self).__name__)

    def close(self):
        raise NotImplementedError('%s does not implement close()' % type(self).__name__)

    def __repr__(self):
        return '<%s %s>' % (type(self).__name__, self.name)
