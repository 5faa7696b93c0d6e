"""Tests for the command line entry points."""

import pytest

from powersplit import cli
from powersplit.cli import CLI, UniqueInMemoryHistory, main
from powersplit.planner import PowerSplitPlanner

SCENARIO_A = ["-energy", "10", "-time", "1", "-t", "1", "-target", "3", "-max", "4"]


class TestMain:
	def test_solution(self, capsys):
		assert main(SCENARIO_A) == 0
		out, err = capsys.readouterr()
		assert out.startswith("RESULT\n")
		assert "Best fraction = 11/36 (gates=4, a(1/2)=2, b(1/3)=2)\n" in out
		assert "OUT\nmerge(L3, L4, L5, L6)\n" in out
		assert err == ""

	def test_degenerate(self, capsys):
		assert main(["-energy=10", "--time=1", "-t=1", "-target", "10"]) == 0
		assert capsys.readouterr().out == "NO SOLUTION: target >= P_in; output power cannot exceed target\n"

	@pytest.mark.parametrize("argv, message", [
		(["-time", "1"], "energy and time must be > 0"),
		(["-energy", "1", "-time", "1", "-t", "abc"], "invalid t; use a rational like 0.5 or 1/2"),
		(["-energy", "1", "-time", "1", "-t", "0"], "t must be > 0"),
		(["-energy", "1", "-time", "1", "-t", "-1/2"], "t must be > 0"),
		(["-bogus", "1"], "flag provided but not defined: -bogus"),
		(["-energy"], "flag needs an argument: -energy"),
	])
	def test_errors(self, capsys, argv, message):
		assert main(argv) == 1
		out, err = capsys.readouterr()
		assert err == f"ERROR: {message}\n"
		assert out == ""

	def test_help(self, capsys):
		assert main(["-h"]) == 0
		assert capsys.readouterr().out.startswith("Usage:")

	def test_default_rate(self, capsys):
		assert main(["-energy", "100", "-time", "60", "-target", "1000", "-max", "3"]) == 0
		assert "P_in = 3000 W (approx 3000.000000 W)" in capsys.readouterr().out

	def test_preset(self, capsys):
		assert main(["-preset", "source-ore", "-target", "100", "-max", "3"]) == 0
		out, err = capsys.readouterr()
		assert "P_in = 200 W (approx 200.000000 W)" in out
		assert err == ""

	def test_unknown_preset(self, capsys):
		assert main(["-preset", "valley", "-target", "1"]) == 1
		assert capsys.readouterr().err.startswith("ERROR: unknown preset 'valley'")

	def test_large_max_warns(self, capsys):
		assert main(["-energy", "10", "-time", "1", "-t", "1", "-target", "10", "-max", "101"]) == 0
		out, err = capsys.readouterr()
		assert err == "WARNING: max > 100 may make the search slow\n"
		assert out.startswith("NO SOLUTION")

	def test_order(self, capsys):
		assert main(SCENARIO_A + ["-order", "23"]) == 0
		assert "G1 split2 in=IN -> out0=G2.out0, out1=L1\n" in capsys.readouterr().out

	def test_save(self, tmp_path, capsys):
		assert main(SCENARIO_A + ["-save", str(tmp_path / "solution0")]) == 0
		assert (tmp_path / "solution0.png").is_file()

	def test_no_arguments_starts_prompt(self, monkeypatch):
		started = []
		monkeypatch.setattr(CLI, "run", lambda self: started.append(self.name))
		assert main([]) == 0
		assert started == ["Power Splitter"]


class TestInteractive:
	def fake_prompt(self, monkeypatch, inputs):
		inputs = list(inputs)

		def prompt(message, history=None):
			if not inputs: raise EOFError
			line = inputs.pop(0)
			history.append_string(line)
			return line

		monkeypatch.setattr(cli, "prompt", prompt)

	def test_runs_each_line(self, monkeypatch, capsys):
		self.fake_prompt(monkeypatch, [" ".join(SCENARIO_A), "", "-energy 10 -time 1 -t 1 -target 10", "q", "-energy 1"])
		CLI("Test", PowerSplitPlanner).run()
		out = capsys.readouterr().out
		assert "Best fraction = 11/36" in out
		assert "NO SOLUTION: target >= P_in" in out

	def test_errors_do_not_stop_the_prompt(self, monkeypatch, capsys):
		self.fake_prompt(monkeypatch, ["-energy 0", " ".join(SCENARIO_A)])
		CLI("Test", PowerSplitPlanner).run()
		out, err = capsys.readouterr()
		assert "ERROR: energy and time must be > 0" in err
		assert "Best fraction = 11/36" in out

	def test_ctrl_c_leaves(self, monkeypatch):
		def prompt(message, history=None):
			raise KeyboardInterrupt
		monkeypatch.setattr(cli, "prompt", prompt)
		shell = CLI("Test", PowerSplitPlanner)
		shell.run()
		assert not shell.running


class TestHistory:
	def test_duplicates_move_to_front(self):
		history = UniqueInMemoryHistory()
		for line in ["a", "b", "a"]:
			history.append_string(line)
		assert history.get_strings() == ["b", "a"]

	def test_division_slash_is_normalized(self):
		history = UniqueInMemoryHistory()
		history.append_string("-t 1⧸2")
		history.append_string("-t 1/2")
		assert history.get_strings() == ["-t 1/2"]
