from sgpacalc.main import run


run()
