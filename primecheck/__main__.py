from primecheck.cli import run

run()
