"""
macroforth - Stack-based Forth dialect with user-defined word macros

Modos de uso:
1. REPL interactivo: python -m macroforth repl
2. Ejecutar archivo Forth: python -m macroforth archivo.fth
3. Evaluar una linea: python -m macroforth -e "1 2 +"

Opciones:
  --debug    muestra los mensajes de depuracion del expansor
"""

import logging
import sys

from .core import ForthError
from .repl import InteractiveForth
from .stack_ops import format_values


def create_forth():
    """Create a new Forth interpreter instance"""
    return InteractiveForth()


def run_source(f, code):
    """Evaluate code and print the resulting stack; return an exit status"""
    try:
        f.eval(code)
    except ForthError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    print(format_values(f.stack()))
    return 0


def main(argv=None):
    args = list(sys.argv[1:] if argv is None else argv)

    level = logging.WARNING
    if '--debug' in args:
        args.remove('--debug')
        level = logging.DEBUG
    logging.basicConfig(level=level, format="%(name)s: %(message)s")

    if not args:
        print(__doc__)
        return 0

    arg = args[0]
    f = create_forth()

    if arg == 'repl':
        f.repl()
        return 0
    if arg == '-e' and len(args) > 1:
        return run_source(f, " ".join(args[1:]))
    if arg.endswith('.fth') or arg.endswith('.forth'):
        with open(arg, 'r') as file:
            code = file.read()
        return run_source(f, code)

    print(f"Argumento no reconocido: {arg}")
    print(__doc__)
    return 2
