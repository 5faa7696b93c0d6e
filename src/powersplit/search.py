from fractions import Fraction

from powersplit.errors import NoSolution
from powersplit.utils.fractions import frac_less, frac_equal

class SearchResult:
	__slots__ = ('a', 'b', 'm', 'D')

	def __init__(self, a, b, m, D):
		self.a = a
		self.b = b
		self.m = m
		self.D = D

	@property
	def gates(self):
		return self.a + self.b

	@property
	def fraction(self):
		return Fraction(self.m, self.D)

	def __eq__(self, other):
		if not isinstance(other, SearchResult): return NotImplemented
		return (self.a, self.b, self.m, self.D) == (other.a, other.b, other.m, other.D)

	def __hash__(self):
		return hash((self.a, self.b, self.m, self.D))

	def __repr__(self):
		return f"SearchResult(a={self.a}, b={self.b}, m={self.m}, D={self.D})"

def candidates(max_gates):
	# every D = 2^a * 3^b with a + b <= max_gates, a-major
	D2 = 1
	for a in range(max_gates + 1):
		D = D2
		for b in range(max_gates - a + 1):
			yield a, b, D
			D *= 3
		D2 *= 2

def compute_m(target, D, p, q):
	# smallest m with m/D > target*q/p, one past the bound even when it lands on an integer
	return target * D * q // p + 1

def find_best(p, q, target, max_gates):
	best = None
	for a, b, D in candidates(max_gates):
		m = compute_m(target, D, p, q)
		if m > D: continue
		if best is None or frac_less(m, D, best.m, best.D) \
			or (frac_equal(m, D, best.m, best.D) and a + b < best.gates):
			best = SearchResult(a, b, m, D)

	if best is None:
		raise NoSolution("no feasible fraction found")
	# can't happen since compute_m is always >= 1, kept in case it changes
	if best.m < 1:
		raise NoSolution("no feasible fraction found")
	return best
