import csv
import json

from wordscramble.harness import run_batch, run_round, write_csv, write_manifest
from wordscramble.session import GameSession


def test_run_round_smoke(dictionary):
    s = GameSession(dictionary, seed=42)
    r = run_round(s, "listen", ["silent", "silent", "ab", "tines", "tinsel"])
    assert r["root"] == "listen"
    assert r["accepted"] == ["tinsel", "silent"]
    assert r["score"] == 12
    assert r["rejections"] == {"ALREADY_USED": 1, "TOO_SHORT": 1, "NOT_A_REAL_WORD": 1}
    assert r["history"][0] == ("silent", "ok")


def test_run_batch_and_outputs(dictionary, tmp_path):
    vocab = ["silent", "tinsel", "enlist", "net", "ten", "xyz"]
    results = run_batch(["listen"], vocab, dictionary, seed=1)
    assert len(results) == 1
    assert results[0]["score"] == 6 * 3 + 3 * 2
    assert not results[0]["rejections"]

    csv_path = write_csv(results, str(tmp_path / "out" / "run.csv"))
    with open(csv_path, newline="", encoding="utf-8") as f:
        rows = list(csv.DictReader(f))
    assert rows[0]["root"] == "listen"
    assert rows[0]["best_word"] == "silent"
    assert rows[0]["rejected_too_short"] == "0"

    m_path = write_manifest({"num_rounds": 1}, str(tmp_path / "m.json"))
    with open(m_path, encoding="utf-8") as f:
        assert json.load(f)["num_rounds"] == 1
