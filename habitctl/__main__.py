from habitctl.cli import run

run()
