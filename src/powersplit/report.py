from powersplit.config import config
from powersplit.utils.fractions import rat_string, float_string

def render_no_solution(reason):
	return f"NO SOLUTION: {reason}\n"

def render_result(plan, digits):
	result = plan.result
	return [
		"RESULT",
		f"P_in = {rat_string(plan.input_power)} W (approx {float_string(plan.input_power, digits)} W)",
		f"Target = {plan.target} W",
		f"Best fraction = {result.m}/{result.D} (gates={result.gates}, a(1/2)={result.a}, b(1/3)={result.b})",
		f"Output power = {rat_string(plan.output_power)} W (approx {float_string(plan.output_power, digits)} W)",
	]

def render_gates(network):
	lines = ["GATES"]
	for gate in network.gates:
		outs = ", ".join(f"out{slot}={output}" for slot, output in enumerate(gate.outputs))
		lines.append(f"{gate.label} split{gate.arity} in={gate.source} -> {outs}")
	return lines

def render_leaves(network):
	lines = ["LEAVES"]
	for leaf in network.leaves:
		lines.append(f"{leaf.label} size=1/{leaf.den} from=G{leaf.gate_id} -> {leaf.destination}")
	return lines

def render_out(network):
	if not network.out_leaf_ids: return ["OUT", "(none)"]
	return ["OUT", "merge(" + ", ".join(leaf.label for leaf in network.out_leaves) + ")"]

def render_connections(network):
	lines = ["CONNECTIONS"]
	if not network.gates: return lines + ["(none)"]
	for gate, resolved in network.connections():
		lines.append(f"{gate.label}: " + " ".join(resolved))
	return lines

def render_report(plan, digits=None):
	if digits is None: digits = config.float_digits
	network = plan.network
	lines = render_result(plan, digits) + [""]
	if not network.gates:
		# the input goes straight out
		lines += ["GATES", "(none)", "OUT", "IN"]
	else:
		lines += render_gates(network) + [""]
		lines += render_leaves(network) + [""]
		lines += render_out(network) + [""]
		lines += render_connections(network)
	return "\n".join(lines) + "\n"
