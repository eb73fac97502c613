"""
Same as the `defunctionalize` command:

    py -m defunctionalize module.py
"""
import sys
from .cmdline import parser, main

parser.prog = "py -m defunctionalize"
sys.exit(main())
