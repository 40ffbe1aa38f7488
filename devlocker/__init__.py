#!/usr/bin/env python3
# -*- coding: utf-8 -*-
from .locker import DeviceLocker
from .capability import Capability, register, unregister, lookup
from .device import Device
from .error import *

__version__ = '1.0.0'
