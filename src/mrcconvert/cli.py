
"""CLI implementation for mrcconvert."""

import json
import sys
from pathlib import Path
from typing import Optional

import typer

from . import decode_map
from .core.model import ParseError, Result
from .core.util import header_asdict, result_asdict
from .export import sidecar_paths, write_descriptor, write_raw
from .io import open_reader

app = typer.Typer(add_completion=False, help="Convert MRC/CCP4 density maps to raw float32 volumes.")


@app.command()
def main(
    file: Path = typer.Argument(..., help="MRC, CCP4 or MAP file to convert"),
    crystallographic: bool = typer.Option(False, "--crystallographic", help="Read words 25-37 as skew matrix/translation"),
    info: bool = typer.Option(False, "--info", help="Print the decoded header as JSON and write nothing"),
    fields: Optional[str] = typer.Option(None, "--fields", help="Comma-separated subset of header keys to emit with --info"),
    output: Optional[Path] = typer.Option(None, "-o", "--output", help="Output stem for .raw/.dat (default: FILE)"),
):
    """Decode FILE and write FILE.raw (voxels) and FILE.dat (descriptor)."""
    sel_fields = set(fields.split(",")) if fields else None

    reader = None
    try:
        reader = open_reader(str(file))
        mrc = decode_map(reader, crystallographic=crystallographic)
        res = Result(True, header_asdict(mrc.header), None, reader.bytes_fetched)
    except (OSError, ParseError) as e:
        res = Result(False, None, str(e), getattr(reader, "bytes_fetched", 0))
    finally:
        if reader is not None:
            reader.close()

    if info or not res.success:
        obj = result_asdict(res, fields=sel_fields)
        json.dump(obj, sys.stdout, indent=2)
        sys.stdout.write("\n")
        if not res.success:
            raise typer.Exit(code=1)
        return

    raw_path, dat_path = sidecar_paths(output if output else file)

    write_raw(mrc.data, raw_path)
    typer.echo(f'Dumped voxel data into "{raw_path}"', err=True)

    write_descriptor(mrc.header, raw_path, dat_path)
    typer.echo(f'Converted header to "{dat_path}"', err=True)

    typer.echo("Done", err=True)


if __name__ == "__main__":
    app()
