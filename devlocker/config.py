#!/usr/bin/env python3
# -*- coding: utf-8 -*-
import os
import yaml
import appdirs
from schema import Schema, And, Use, Optional, SchemaError
from .error import ErrorConfig

user_config_dir = appdirs.user_config_dir('devlocker')

LOG_LEVELS = ('DEBUG', 'INFO', 'WARNING', 'ERROR')

DEFAULTS = {
    'baudrate': 115200,
    'lock': True,
    'log_level': 'WARNING',
}

config_yml_schema = Schema({
    Optional('baudrate'): And(int, lambda x: x > 0),
    Optional('lock'): bool,
    Optional('log_level'): And(str, Use(str.upper), lambda x: x in LOG_LEVELS),
})


def validate(schema, data):
    try:
        return schema.validate(data)
    except SchemaError as e:
        error = [row for row in e.autos if row]
        raise ErrorConfig(os.linesep.join(error))


def load_config(filename=None):
    '''Load config.yml from the user config dir, missing keys get defaults.'''
    if filename is None:
        filename = os.path.join(user_config_dir, 'config.yml')

    config = dict(DEFAULTS)

    if not os.path.exists(filename):
        return config

    with open(filename, 'r') as fd:
        try:
            data = yaml.safe_load(fd)
        except yaml.YAMLError as e:
            raise ErrorConfig('Invalid config file %s: %s' % (filename, e))

    if data is None:
        return config

    config.update(validate(config_yml_schema, data))
    return config
