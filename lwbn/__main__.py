from lwbn.main import run

run()
