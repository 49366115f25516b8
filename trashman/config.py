# -*- coding: utf-8 -*-
import os
import json
from dataclasses import dataclass

# --- Directorios y Archivos ---
APP_NAME = "trashman"
FILES_DIR_NAME = "files"
INFO_DIR_NAME = "info"
ORPHANS_DIR_NAME = "orphans"
CONFIG_FILE_NAME = "config.json"
HISTORY_FILE_NAME = "restore_history"

# --- Variables de entorno ---
ENV_ROOT = "TRASH_ROOT"
ENV_NO_LINE_EDITOR = "NO_LINE_EDITOR"
ENV_NO_RESTORE_HELP = "NO_RESTORE_HELP"
ENV_LANGUAGE = "TRASH_LANG"


@dataclass(frozen=True)
class TrashConfig:
    """Everything the store and the engine need to know about their environment."""
    root: str
    line_editor: bool = True
    restore_help: bool = True
    language: str = "en"
    history_file: str = None

    @property
    def files_dir(self):
        return os.path.join(self.root, FILES_DIR_NAME)

    @property
    def info_dir(self):
        return os.path.join(self.root, INFO_DIR_NAME)

    @property
    def orphans_dir(self):
        return os.path.join(self.root, ORPHANS_DIR_NAME)


def _xdg_dir(environ, var, fallback):
    base = environ.get(var) or os.path.join(os.path.expanduser("~"), fallback)
    return os.path.join(base, APP_NAME)

def default_root(environ=None):
    """Carpeta de datos por defecto del usuario."""
    environ = os.environ if environ is None else environ
    return _xdg_dir(environ, "XDG_DATA_HOME", os.path.join(".local", "share"))

def config_dir(environ=None):
    environ = os.environ if environ is None else environ
    return _xdg_dir(environ, "XDG_CONFIG_HOME", ".config")

def load_client_config(path=None):
    """Carga la configuración general del cliente."""
    path = path or os.path.join(config_dir(), CONFIG_FILE_NAME)
    if os.path.exists(path):
        with open(path, 'r', encoding='utf-8') as f:
            try:
                data = json.load(f)
            except json.JSONDecodeError:
                return {}
        return data if isinstance(data, dict) else {}
    return {}

def _flag(value):
    return bool(value) and value.strip().lower() not in ("0", "false", "no")

def load_config(environ=None, config_path=None):
    """
    Builds a TrashConfig from defaults, the JSON client config and the environment.
    Environment variables win over the config file.
    """
    environ = os.environ if environ is None else environ
    if config_path is None:
        config_path = os.path.join(config_dir(environ), CONFIG_FILE_NAME)
    client_config = load_client_config(config_path)

    root = environ.get(ENV_ROOT) or client_config.get("root") or default_root(environ)
    line_editor = bool(client_config.get("line_editor", True))
    restore_help = bool(client_config.get("restore_help", True))
    if _flag(environ.get(ENV_NO_LINE_EDITOR, "")):
        line_editor = False
    if _flag(environ.get(ENV_NO_RESTORE_HELP, "")):
        restore_help = False
    language = environ.get(ENV_LANGUAGE) or client_config.get("language", "en")

    return TrashConfig(
        root=os.path.abspath(os.path.expanduser(root)),
        line_editor=line_editor,
        restore_help=restore_help,
        language=language,
        history_file=os.path.join(os.path.dirname(config_path), HISTORY_FILE_NAME),
    )
