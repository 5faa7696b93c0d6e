class PowerSplitError(Exception):
	pass

class ValidationError(PowerSplitError, ValueError):
	# bad, zero or unparseable user input, reported before any computation
	pass

class DegenerateBound(PowerSplitError):
	# target >= P_in, nothing to split
	pass

class NoSolution(PowerSplitError):
	# no admissible fraction within the gate budget
	pass
