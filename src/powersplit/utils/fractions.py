import math, re
from fractions import Fraction

slash_symbols = ['/', '⧸']
integer_regex = re.compile(r'[+-]?\d+')
decimal_regex = re.compile(r'([+-]?)(\d*)\.(\d*)(?:\((\d+)\))?')

def reduce_fraction(p, q):
	g = math.gcd(p, q)
	# gcd(0, 0) == 0, nothing to divide by
	if g == 0 or g == 1: return p, q
	return p // g, q // g

def frac_less(m1, d1, m2, d2):
	# m1/d1 < m2/d2, a missing right hand side always loses
	if m2 is None or d2 is None:
		return True
	return m1 * d2 < m2 * d1

def frac_equal(m1, d1, m2, d2):
	if m2 is None or d2 is None:
		return False
	return m1 * d2 == m2 * d1

def parse_decimal(decimal_str):
	match = decimal_regex.fullmatch(decimal_str)
	if not match or not any(match.groups()[1:]):
		raise ValueError("Invalid format. Use w.f, w.(r) or w.f(r) for decimals, or just w for whole numbers.")
	sign, w, f, r = match.groups()
	return sign, int(w or 0), f or '', r or ''

def parse_fraction(fraction_str):
	fraction_str = fraction_str.strip()
	for slash_symbol in slash_symbols:
		if slash_symbol in fraction_str:
			numerator, denominator = fraction_str.split(slash_symbol, 1)
			if not integer_regex.fullmatch(numerator) or not denominator.isdigit():
				raise ValueError(f"Invalid fraction {fraction_str!r}")
			if int(denominator) == 0: raise ValueError("zero denominator")
			return Fraction(int(numerator), int(denominator))
	if '.' not in fraction_str:
		if not integer_regex.fullmatch(fraction_str):
			raise ValueError(f"Invalid number {fraction_str!r}")
		return Fraction(int(fraction_str))
	sign, w, f, r = parse_decimal(fraction_str)
	f_len = len(f)
	res = Fraction(w)
	if f: res += Fraction(int(f), 10**f_len)
	if r: res += Fraction(int(r), 10**f_len*(10**len(r)-1))
	return -res if sign == '-' else res

def rat_string(frac):
	# "n" for whole numbers, "n/d" otherwise
	frac = Fraction(frac)
	if frac.denominator == 1: return str(frac.numerator)
	return f"{frac.numerator}/{frac.denominator}"

def float_string(frac, digits):
	# exact decimal rendering, rounded half away from zero
	frac = Fraction(frac)
	sign = '-' if frac < 0 else ''
	scale = 10**digits
	scaled, remainder = divmod(abs(frac.numerator) * scale, frac.denominator)
	if 2 * remainder >= frac.denominator: scaled += 1
	integer_part, decimal_part = divmod(scaled, scale)
	if digits == 0: return f"{sign}{integer_part}"
	return f"{sign}{integer_part}.{decimal_part:0{digits}d}"
