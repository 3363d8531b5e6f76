from nexuscore.main import run

run()
