"""The programming interfaces for converting interface artifacts to source."""

from __future__ import annotations

import os
from pathlib import Path

from . import codegen
from .errors import CodeGenError, ConversionError, context_area
from .loader import load_interface

def config( # pylint: disable=too-many-arguments
        runtime_namespace='Neat',
        private_hook='reflect_private_members',
        template=None,
        input_suffix='.ifc.json',
        output_suffix='.cpp',
        verbose=False):
    '''The helper function to dump the default configuration of a conversion.'''
    res = {
        'runtime_namespace': runtime_namespace,
        'private_hook': private_hook,
        'template': template,
        'input_suffix': input_suffix,
        'output_suffix': output_suffix,
        'verbose': verbose,
    }
    return res.copy()

def _real_config(kwargs):
    real_config = config()
    for k, v in kwargs.items():
        if k not in real_config:
            raise ValueError(f'Invalid config key: {k}')
        real_config[k] = v
    return real_config

def generate(interface, **kwargs) -> str:
    '''
    Generate the reflection source for an already loaded interface.
    Args:
        interface (ModuleInterface): The interface to convert.
        runtime_namespace (str): Namespace of the runtime type registry.
        private_hook (str): Friend function opting classes into private reflection.
        template (str): Document template with ``{module_name}`` and
            ``{registration_body}`` placeholders.
        verbose (bool): Whether to print every registered type.
    '''
    real_config = _real_config(kwargs)
    return codegen.codegen(interface, **real_config)

def convert(in_path, out_path, **kwargs) -> None:
    '''
    Convert one interface artifact into one reflection source file.

    Raises:
        ConversionError: The input is missing or misnamed, or the output
            cannot be written.
        CodeGenError: The interface could not be converted.
    '''
    real_config = _real_config(kwargs)
    in_path = Path(in_path)
    out_path = Path(out_path)

    with context_area(f"converting '{in_path}' to '{out_path}'"):
        if not in_path.exists():
            raise ConversionError(f"Input '{in_path}' does not exist")
        if not in_path.name.endswith(real_config['input_suffix']):
            raise ConversionError(
                f"Input '{in_path}' is not a {real_config['input_suffix']} file")
        if not out_path.name.endswith(real_config['output_suffix']):
            raise ConversionError(
                f"Output '{out_path}' is not a {real_config['output_suffix']} file, "
                f"its extension is: '{out_path.suffix}'")

        interface = load_interface(in_path)
        code = codegen.codegen(interface, **real_config)

        try:
            with open(out_path, 'w', encoding='utf-8') as fd:
                fd.write(code)
        except OSError as err:
            raise ConversionError(
                f"Could not open output file '{out_path}' for writing. Reason: {err}") from err

def convert_file(in_path, out_path, **kwargs) -> bool:
    '''The reporting wrapper of ``convert``: prints failures and returns success.'''
    try:
        convert(in_path, out_path, **kwargs)
    except CodeGenError as err:
        print(f'ERROR: {err}')
        return False
    return True

def scan(in_dir, out_dir, **kwargs):
    '''
    Convert every interface artifact in ``in_dir`` into ``out_dir``.

    A failed artifact does not stop the scan. Returns ``(input, output, ok)``
    triples in file name order.
    '''
    real_config = _real_config(kwargs)
    in_dir = Path(in_dir)
    out_dir = Path(out_dir)
    if not in_dir.is_dir():
        raise ConversionError(f"Input directory '{in_dir}' does not exist")
    try:
        os.makedirs(out_dir, exist_ok=True)
    except OSError as err:
        raise ConversionError(
            f"Could not create output directory '{out_dir}'. Reason: {err}") from err

    input_suffix = real_config['input_suffix']
    results = []
    for entry in sorted(in_dir.iterdir()):
        if not entry.is_file() or not entry.name.endswith(input_suffix):
            continue
        stem = entry.name[:-len(input_suffix)]
        output = (out_dir / f"{stem}{real_config['output_suffix']}").absolute()
        print(f"Converting '{entry.absolute()}' to '{output}'")
        ok = convert_file(entry, output, **real_config)
        if not ok:
            print(f"ERROR: Failed to convert '{entry}'")
        results.append((entry, output, ok))
    return results
