#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
gen-info - Extractor del header de ROMs de Sega Genesis / Mega Drive
Punto de entrada principal
"""

import sys

from geninfo.cli import main

if __name__ == "__main__":
    sys.exit(main())
