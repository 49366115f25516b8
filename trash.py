# -*- coding: utf-8 -*-
import os
import sys

# Permite ejecutar el cliente sin instalar el paquete
current_dir = os.path.dirname(os.path.abspath(__file__))
sys.path.insert(0, current_dir)

from trashman.cli import trash

if __name__ == "__main__":
    trash()
