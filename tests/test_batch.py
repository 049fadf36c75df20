import logging
import math

import pandas as pd
from engine.batch import COLUMNS, evaluate_batch, summarize


def test_batch_rows_in_order():
    df = evaluate_batch(["1+2", "(1+2", "1/0", "2^3^2"])
    assert list(df.columns) == COLUMNS
    assert df["expression"].tolist() == ["1+2", "(1+2", "1/0", "2^3^2"]
    assert df.loc[0, "value"] == 3.0
    assert math.isnan(df.loc[1, "value"])
    assert "unbalanced" in df.loc[1, "error"]
    assert df.loc[2, "value"] == math.inf
    assert pd.isna(df.loc[2, "error"])
    assert df.loc[3, "value"] == 512.0

def test_batch_empty():
    df = evaluate_batch([])
    assert df.empty
    assert list(df.columns) == COLUMNS

def test_summary():
    df = evaluate_batch(["1", "0/0", "x", "4|1"])
    assert summarize(df) == {"total": 4, "ok": 3, "failed": 1, "non_finite": 1}

def test_failures_logged(caplog):
    with caplog.at_level(logging.WARNING, logger="engine.batch"):
        evaluate_batch(["1 $ 2"])
    assert any("1 $ 2" in r.getMessage() for r in caplog.records)

def test_deeply_nested_row_does_not_abort_batch():
    deep = "(" * 3000 + "1" + ")" * 3000
    df = evaluate_batch(["1+1", deep, "2"])
    assert len(df) == 3
    assert df["value"].tolist()[0] == 2.0
    assert df["value"].tolist()[2] == 2.0
    assert math.isnan(df.loc[1, "value"])
    assert df.loc[1, "error"] == "expression nested too deeply"
