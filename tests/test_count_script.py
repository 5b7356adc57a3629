import importlib.util
import json
import os

ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), '..'))

spec = importlib.util.spec_from_file_location(
    "count_reachable",
    os.path.join(ROOT, "scripts", "count_reachable.py"),
)
module = importlib.util.module_from_spec(spec)
assert spec and spec.loader
spec.loader.exec_module(module)  # type: ignore


def test_count_script_prints_summary(capsys, monkeypatch):
    monkeypatch.delenv("TTT_FIRST_PLAYER", raising=False)
    assert module.main([]) == 0
    out = json.loads(capsys.readouterr().out)
    assert out["reachable"] == 5478
    assert out["nonterminal"] == 5478 - 958
    assert set(out["terminal"]) == {"x", "o", "draw"}
