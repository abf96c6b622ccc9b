'''The module to generate reflection registration code for a module interface'''

# Import all the necessary items from the implementation
from .impl import codegen
from .types import render_type, render_fundamental
from .namespace import render_namespace, qualified_name
from .visibility import reflects_private_members, is_decl_exported, is_type_exported
from .members import emit_type, TypeRegistration
from .scanner import scan_aggregates
from .assembler import Assembler, to_identifier
