# What it does: Manages all read/write operations for the `.kit/config` file
# What data structure it uses: Map / Hash Table / Dictionary (the INI file format is a map of sections to key-value pairs, managed by Python's `configparser`)

import configparser
import os

from .objects import KIT_DIR

DEFAULTS = {
    'core.defaultbranch': 'master',
    'diff.mode': 'paired',
}


def get_config_path(repo_root):  # Returns the path to the config file within the repository
    return os.path.join(repo_root, KIT_DIR, 'config')


def read_config(repo_root): # Reads and returns the configuration as a ConfigParser object
    config = configparser.ConfigParser()
    config_path = get_config_path(repo_root)
    if os.path.exists(config_path):
        config.read(config_path)
    return config


def split_key(key):
    try:
        section, option = key.split('.', 1)
    except ValueError:
        raise ValueError(f"Invalid key format '{key}'. Should be 'section.key'.")
    if not section or not option:
        raise ValueError(f"Invalid key format '{key}'. Should be 'section.key'.")
    return section, option


def get_config_value(repo_root, key, fallback=None): # Returns the configured value, then the built-in default, then `fallback`
    section, option = split_key(key)
    config = read_config(repo_root)
    return config.get(section, option, fallback=DEFAULTS.get(key, fallback))


def write_config(repo_root, key, value): # Sets a configuration key to a value and writes it to the config file
    section, option = split_key(key)
    config = read_config(repo_root)

    if not config.has_section(section):
        config.add_section(section)

    config.set(section, option, value)

    with open(get_config_path(repo_root), 'w') as configfile:
        config.write(configfile)
