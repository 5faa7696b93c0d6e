from fractions import Fraction

from powersplit.errors import ValidationError
from powersplit.utils.fractions import parse_fraction, reduce_fraction

def parse_rate(rate):
	if isinstance(rate, Fraction): return rate
	if isinstance(rate, int): return Fraction(rate)
	try:
		return parse_fraction(str(rate))
	except ValueError:
		raise ValidationError("invalid t; use a rational like 0.5 or 1/2") from None

def input_power(energy, duration, rate):
	# P_in = energy * duration * rate, as a reduced p/q
	for value in (energy, duration):
		if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
			raise ValidationError("energy and time must be > 0")
	rate = parse_rate(rate)
	if rate <= 0:
		raise ValidationError("t must be > 0")
	p = energy * duration * rate.numerator
	q = rate.denominator
	return reduce_fraction(p, q)
