from cyclorank.cli import app

app(prog_name="cyclorank")
