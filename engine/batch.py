import logging
from typing import Iterable

import numpy as np
import pandas as pd

from parsemath.errors import ParseMathError
from parsemath.eval import evaluate
from parsemath.parser import parse

logger = logging.getLogger(__name__)

COLUMNS = ["expression", "value", "error"]


def evaluate_batch(expressions: Iterable[str]) -> pd.DataFrame:
    """
    Evaluate each expression independently.

    One row per input, in input order. Failures do not stop the batch: the
    row gets value NaN and the error message instead.
    """
    rows = []
    for src in expressions:
        try:
            value = evaluate(parse(src))
            err = None
        except ParseMathError as e:
            logger.warning("expression %r failed: %s", src, e)
            value, err = np.nan, str(e)
        except RecursionError:
            logger.warning("expression %r nested too deeply", src)
            value, err = np.nan, "expression nested too deeply"
        else:
            logger.debug("expression %r -> %r", src, value)
        rows.append((src, value, err))
    df = pd.DataFrame(rows, columns=COLUMNS)
    df["value"] = df["value"].astype(float)
    return df


def summarize(df: pd.DataFrame) -> dict:
    ok = df["error"].isna()
    return {
        "total": int(len(df)),
        "ok": int(ok.sum()),
        "failed": int((~ok).sum()),
        "non_finite": int((ok & ~np.isfinite(df["value"])).sum()),
    }
