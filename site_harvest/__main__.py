# site_harvest/__main__.py
from site_harvest.cli import cli

cli(prog_name="site-harvest")
