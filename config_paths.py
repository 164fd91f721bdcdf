import json
import os

from log_utils import get_logger

logger = get_logger(__name__)

HOME = os.path.expanduser("~")
XDG_CONFIG_HOME = os.environ.get("XDG_CONFIG_HOME")
CONFIG_HOME = XDG_CONFIG_HOME if XDG_CONFIG_HOME else os.path.join(HOME, ".config")
CONFIG_DIR = os.path.join(CONFIG_HOME, "tablecopy")
CONFIG_JSON = os.path.join(CONFIG_DIR, "config.json")

# default settings
FORCE8BIT_DEFAULT = False
EMPTY_STRING_IS_NULL_DEFAULT = False
CLIPBOARD_INTERFACE_COMMAND_DEFAULT = None
DEFAULT_TABLE_NAME_DEFAULT = None
NULL_STRING_DEFAULT = "∅"
BORDER_DEFAULT = 1


def load_config():
    cfg = {
        "FORCE8BIT": FORCE8BIT_DEFAULT,
        "EMPTY_STRING_IS_NULL": EMPTY_STRING_IS_NULL_DEFAULT,
        "CLIPBOARD_INTERFACE_COMMAND": CLIPBOARD_INTERFACE_COMMAND_DEFAULT,
        "DEFAULT_TABLE_NAME": DEFAULT_TABLE_NAME_DEFAULT,
        "NULL_STRING": NULL_STRING_DEFAULT,
        "BORDER": BORDER_DEFAULT,
    }

    if not os.path.exists(CONFIG_JSON):
        return cfg

    try:
        with open(CONFIG_JSON, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, json.JSONDecodeError) as exc:
        logger.warning("Ignoring unreadable config %s: %s", CONFIG_JSON, exc)
        return cfg

    if not isinstance(data, dict):
        return cfg

    for key, cfg_key in (
        ("force8bit", "FORCE8BIT"),
        ("empty_string_is_null", "EMPTY_STRING_IS_NULL"),
    ):
        value = data.get(key)
        if isinstance(value, bool):
            cfg[cfg_key] = value

    clip_cmd = data.get("clipboard_interface_command")
    if isinstance(clip_cmd, list) and clip_cmd and all(isinstance(item, str) for item in clip_cmd):
        cfg["CLIPBOARD_INTERFACE_COMMAND"] = clip_cmd

    table_name = data.get("default_table_name")
    if isinstance(table_name, str) and table_name.strip():
        cfg["DEFAULT_TABLE_NAME"] = table_name.strip()

    null_string = data.get("null_string")
    if isinstance(null_string, str):
        cfg["NULL_STRING"] = null_string

    border = data.get("border")
    if border in (1, 2) and not isinstance(border, bool):
        cfg["BORDER"] = border

    return cfg
