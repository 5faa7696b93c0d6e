from powersplit.config import config
from powersplit.network import Gate, Leaf, Network, INPUT, OUT, WAREHOUSE, gate_input_label, leaf_label
from powersplit.utils.math import smooth_exponents

def arity_sequence(a, b, arity_order=None):
	# a 2-way and b 3-way gates, grouped by arity in the given order
	if arity_order is None: arity_order = config.arity_order
	arity_order = tuple(arity_order)
	if sorted(arity_order) != config.allowed_arities:
		raise ValueError(f"arity order must be a permutation of (2, 3), got {arity_order}")
	counts = {2: a, 3: b}
	sequence = []
	for k in arity_order:
		sequence.extend([k] * counts[k])
	return sequence

def build_network(result, arity_order=None, log=None):
	a, b, m, D = result.a, result.b, result.m, result.D
	if smooth_exponents(D) != (a, b): raise ValueError(f"D = {D} is not 2^{a} * 3^{b}")
	if m < 0 or m > D: raise ValueError(f"{m}/{D} is not a fraction of the input")

	if a == 0 and b == 0:
		# no gates, the input goes straight out
		return Network([], [Leaf(1, 1, OUT, 0)])

	k_list = arity_sequence(a, b, arity_order)

	gates = []
	leaves = []

	m_remain = m
	d_remain = D
	den = 1
	leaf_id = 1

	for i, k in enumerate(k_list):
		den *= k
		d_remain //= k

		# x = number of leaves at this gate routed to OUT
		x = min(m_remain // d_remain, k - 1)
		m_remain -= x * d_remain

		gate = Gate(i + 1, k, INPUT if i == 0 else gate_input_label(i), den)
		if log: log(f"G{gate.gate_id} split{k}: digit {x}, remaining {m_remain}/{d_remain}\n")

		for j in range(k - 1):
			leaves.append(Leaf(leaf_id, den, OUT if j < x else WAREHOUSE, gate.gate_id))
			gate.leaf_ids.append(leaf_id)
			leaf_id += 1

		if i == len(k_list) - 1:
			# m_remain is 0 or 1 here since m <= D, the last output is a leaf of its own
			leaves.append(Leaf(leaf_id, den, OUT if m_remain == 1 else WAREHOUSE, gate.gate_id))
			gate.continuation = leaf_label(leaf_id)
			leaf_id += 1
			m_remain = 0
		else:
			gate.continuation = gate_input_label(i + 2)

		gates.append(gate)

	return Network(gates, leaves)
