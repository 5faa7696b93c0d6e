def smooth_exponents(n):
	# (a, b) such that n == 2^a * 3^b, None if n has another prime factor
	if n <= 0: return None
	a = b = 0
	while n % 2 == 0:
		n //= 2
		a += 1
	while n % 3 == 0:
		n //= 3
		b += 1
	return (a, b) if n == 1 else None
