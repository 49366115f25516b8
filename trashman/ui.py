# -*- coding: utf-8 -*-
import sys
import threading
import itertools
import time
import re
import click
from .i18n import t

# --- Colores y Estilos ---
T = "\033[1;36m"  # Turquesa para índices y títulos
O = "\033[97m"  # Blanco para rutas
I = "\033[93m"  # Amarillo para información y prompts
S = "\033[92m"  # Verde para éxito
E = "\033[91m"  # Rojo para errores
R = "\033[0m"   # Reset

def get_visual_length(text):
    """Calcula la longitud visual del texto, ignorando secuencias de escape ANSI."""
    return len(re.sub(r'\x1B\[[0-?]*[ -/]*[@-~]', '', text))

def bytes_a_legible(b):
    """Convierte un tamaño en bytes a un formato legible."""
    if b is None: b = 0
    for unit, factor in (("GB", 1024**3), ("MB", 1024**2), ("KB", 1024)):
        if b >= factor:
            return f"{b / factor:.2f} {unit}"
    return f"{b} B"

def print_info(message):
    click.echo(f"{I}{message}{R}")

def print_success(message):
    click.echo(f"{S}{message}{R}")

def print_warning(message):
    """Avisos por elemento: van a stderr pero no detienen la operación."""
    click.echo(f"{I}» {message}{R}", err=True)

def print_error(message):
    click.echo(f"{E}{t('error')}: {message}{R}", err=True)

def print_record(ordinal, path, width=4):
    click.echo(f"{T}{ordinal:>{width}}{R}  {O}{path}{R}")

class AnimacionSpinner:
    """Gestiona una animación de spinner en la consola para operaciones largas."""
    def __init__(self, mensaje="Procesando...", enabled=None):
        self.mensaje = mensaje.rstrip('.')
        self.enabled = sys.stdout.isatty() if enabled is None else enabled
        self.evento_detener = threading.Event()
        self.animacion = itertools.cycle(['.  ', '.. ', '...'])
        self.hilo = threading.Thread(target=self._girar, daemon=True)

    def _girar(self):
        while not self.evento_detener.is_set():
            sys.stdout.write(f'\r{T}» {self.mensaje}{next(self.animacion)}{R}')
            sys.stdout.flush()
            time.sleep(0.2)

    def __enter__(self):
        if self.enabled:
            self.hilo.start()
        return self

    def __exit__(self, exc_type, exc_value, traceback):
        if not self.enabled:
            return
        self.evento_detener.set()
        self.hilo.join()
        clear_line = ' ' * (get_visual_length(self.mensaje) + 20)
        sys.stdout.write(f'\r{clear_line}\r')
        sys.stdout.flush()
