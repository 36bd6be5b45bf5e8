# cli.py

"""
Run JsPacker from a source checkout without installing it.

Example:
    python cli.py --config js_packer.yaml pack build --source src --report reports/pack.json
"""
from js_packer.cli import cli


if __name__ == '__main__':
    cli()
