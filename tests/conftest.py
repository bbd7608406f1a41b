"""
Configuración global de pytest para gen-info

- Agrega el directorio raíz al sys.path para importar el paquete sin instalarlo
- Limpia las variables de entorno de configuración para que los tests no
  dependan del entorno del desarrollador
"""

import os
import sys
from pathlib import Path

# Agregar el directorio raíz al sys.path para importar módulos
project_root = Path(__file__).parent.parent.absolute()
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

# Configuración por defecto durante los tests (los tests que la necesitan usan patch.dict)
os.environ.pop("GENINFO_STRICT", None)
os.environ.pop("GENINFO_LOG_LEVEL", None)
