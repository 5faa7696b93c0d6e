from fractions import Fraction

INPUT = "IN"
OUT = "OUT"
WAREHOUSE = "WAREHOUSE"
destinations = (OUT, WAREHOUSE)

def gate_label(gate_id):
	return f"G{gate_id}"

def gate_input_label(gate_id):
	return f"G{gate_id}.out0"

def leaf_label(leaf_id):
	return f"L{leaf_id}"

class Leaf:
	def __init__(self, leaf_id, den, destination, gate_id=0):
		if destination not in destinations: raise ValueError(f"unknown destination {destination!r}")
		if den <= 0: raise ValueError("non positive denominator")
		self.leaf_id = leaf_id
		self.den = den
		self.destination = destination
		self.gate_id = gate_id

	@property
	def value(self):
		return Fraction(1, self.den)

	@property
	def label(self):
		return leaf_label(self.leaf_id)

	def __eq__(self, other):
		if not isinstance(other, Leaf): return NotImplemented
		return (self.leaf_id, self.den, self.destination, self.gate_id) == (other.leaf_id, other.den, other.destination, other.gate_id)

	def __repr__(self):
		return f"Leaf({self.label}, 1/{self.den}, G{self.gate_id} -> {self.destination})"

class Gate:
	def __init__(self, gate_id, arity, source, den):
		self.gate_id = gate_id
		self.arity = arity
		self.source = source
		# size of each output of this gate is 1/den
		self.den = den
		self.leaf_ids = []
		self.continuation = None

	@property
	def label(self):
		return gate_label(self.gate_id)

	@property
	def outputs(self):
		# slot 0 is the continuation, slots 1..k-1 are leaves
		return [self.continuation] + [leaf_label(leaf_id) for leaf_id in self.leaf_ids]

	def __eq__(self, other):
		if not isinstance(other, Gate): return NotImplemented
		return (self.gate_id, self.arity, self.source, self.den, self.leaf_ids, self.continuation) == \
			(other.gate_id, other.arity, other.source, other.den, other.leaf_ids, other.continuation)

	def __repr__(self):
		return f"Gate({self.label}, split{self.arity}, in={self.source}, outs={self.outputs})"

# a strict chain, gates and leaves are stored in id order so ids double as indices
class Network:
	def __init__(self, gates, leaves):
		self.gates = list(gates)
		self.leaves = list(leaves)
		self.out_leaf_ids = sorted(leaf.leaf_id for leaf in self.leaves if leaf.destination == OUT)

	def gate(self, gate_id):
		if not 1 <= gate_id <= len(self.gates): raise KeyError(gate_id)
		return self.gates[gate_id - 1]

	def leaf(self, leaf_id):
		if not 1 <= leaf_id <= len(self.leaves): raise KeyError(leaf_id)
		return self.leaves[leaf_id - 1]

	@property
	def out_leaves(self):
		return [self.leaf(leaf_id) for leaf_id in self.out_leaf_ids]

	def out_share(self):
		return sum((leaf.value for leaf in self.out_leaves), Fraction(0))

	def total_share(self):
		return sum((leaf.value for leaf in self.leaves), Fraction(0))

	def resolve(self, label):
		# where an output slot ends up: the next gate or the leaf's sink
		if label.startswith("G"):
			return label.split(".", 1)[0]
		if label.startswith("L"):
			try:
				return self.leaf(int(label[1:])).destination
			except (ValueError, KeyError):
				return label
		return label

	def connections(self):
		return [(gate, [self.resolve(output) for output in gate.outputs]) for gate in self.gates]

	def __eq__(self, other):
		if not isinstance(other, Network): return NotImplemented
		return self.gates == other.gates and self.leaves == other.leaves

	def __repr__(self):
		return f"Network(gates={self.gates}, leaves={self.leaves})"

	def to_nx_graph(self):
		import networkx as nx
		G = nx.DiGraph()
		n = len(self.gates)
		G.add_node(INPUT, label=INPUT, level=0)
		for gate in self.gates:
			G.add_node(gate.label, label=f"{gate.label}\nsplit{gate.arity}", level=gate.gate_id)
		for leaf in self.leaves:
			G.add_node(leaf.label, label=f"{leaf.label}\n{leaf.value}", level=leaf.gate_id + 1)
		for sink in destinations:
			G.add_node(sink, label=sink, level=n + 2)

		if not self.gates:
			for leaf in self.leaves: G.add_edge(INPUT, leaf.label, slot=0)
		for gate in self.gates:
			G.add_edge(INPUT if gate.gate_id == 1 else gate_label(gate.gate_id - 1), gate.label, slot=0)
			for slot, leaf_id in enumerate(gate.leaf_ids, start=1):
				G.add_edge(gate.label, leaf_label(leaf_id), slot=slot)
			if gate.continuation.startswith("L"):
				G.add_edge(gate.label, gate.continuation, slot=0)
		for leaf in self.leaves:
			G.add_edge(leaf.label, leaf.destination)
		return G

	def save(self, filename):
		import os
		import matplotlib.pyplot as plt
		import networkx as nx
		from powersplit.config import config

		G = self.to_nx_graph()
		pos = nx.multipartite_layout(G, subset_key="level")
		width = max(6, 2 * (len(self.gates) + 3))
		height = max(4, len(self.leaves))
		fig, ax = plt.subplots(figsize=(width, height))

		# invert colors
		fig.patch.set_facecolor("black")
		ax.set_facecolor("black")
		ax.axis("off")
		nx.draw_networkx_nodes(G, pos, ax=ax, node_size=1200, node_color="black", edgecolors="white")
		nx.draw_networkx_labels(G, pos, labels=nx.get_node_attributes(G, "label"), ax=ax, font_size=8, font_color="white")
		nx.draw_networkx_edges(G, pos, ax=ax, edge_color="white", arrows=True, node_size=1200)

		filepath = f"{filename}.{config.solutions_filename_extension}"
		dirname = os.path.dirname(filepath)
		if dirname: os.makedirs(dirname, exist_ok=True)
		fig.savefig(filepath, format=config.solutions_filename_extension, facecolor=fig.get_facecolor())
		plt.close(fig)
		return filepath
