import logging
import math
import os
from contextlib import contextmanager
from typing import List

import pandas as pd
from fastapi import FastAPI, HTTPException
from pydantic import BaseModel

from parsemath.analyzer import analyze
from parsemath.ast_utils import ast_to_dict, ast_to_infix, ast_to_pretty
from parsemath.errors import ParseMathError
from parsemath.eval import evaluate as eval_ast
from parsemath.parser import parse as parse_expr
from parsemath.token import SYMBOLS, is_right_associative, precedence_of
from engine.batch import evaluate_batch, summarize

logger = logging.getLogger(__name__)

MAX_BATCH = int(os.environ.get("PARSEMATH_MAX_BATCH", "1000"))

app = FastAPI(title="parsemath")


class ExprBody(BaseModel):
    expr: str


class BatchBody(BaseModel):
    exprs: List[str]


def _number_out(value: float) -> dict:
    # JSON has no inf/nan; report them by name
    value = float(value)
    if math.isfinite(value):
        return {"result": value}
    return {"result": None, "repr": repr(value)}


@app.get("/operators")
def operators():
    out = []
    for sym, tok in SYMBOLS.items():
        prec = precedence_of(tok)
        if not prec:
            continue
        out.append({
            "symbol": sym,
            "token": tok.kind.name,
            "precedence": prec.name,
            "level": int(prec),
            "associativity": "right" if is_right_associative(tok) else "left",
        })
    return {"operators": sorted(out, key=lambda o: o["level"])}


@contextmanager
def client_errors(expr: str):
    try:
        yield
    except ParseMathError as e:
        logger.debug("expression %r failed: %s", expr, e)
        raise HTTPException(status_code=400, detail=str(e))
    except RecursionError:
        raise HTTPException(status_code=400, detail="expression nested too deeply")


@app.post("/parse")
def parse(body: ExprBody):
    with client_errors(body.expr):
        ast = parse_expr(body.expr)
        analysis = analyze(ast).to_dict()
    return {"ok": True, "analysis": analysis}


@app.post("/ast")
def ast_view(body: ExprBody):
    with client_errors(body.expr):
        ast = parse_expr(body.expr)
        return {
            "ok": True,
            "pretty": ast_to_pretty(ast),
            "infix": ast_to_infix(ast),
            "tree": ast_to_dict(ast),
        }


@app.post("/evaluate")
def evaluate(body: ExprBody):
    with client_errors(body.expr):
        value = eval_ast(parse_expr(body.expr))
    return {"expr": body.expr, **_number_out(value)}


@app.post("/evaluate_batch")
def evaluate_batch_api(body: BatchBody):
    if len(body.exprs) > MAX_BATCH:
        raise HTTPException(status_code=413, detail=f"batch of {len(body.exprs)} exceeds limit {MAX_BATCH}")
    df = evaluate_batch(body.exprs)
    rows = []
    for src, value, err in df.itertuples(index=False, name=None):
        err = None if pd.isna(err) else err
        row = {"expr": src, "error": err}
        if err is None:
            row.update(_number_out(value))
        else:
            row["result"] = None
        rows.append(row)
    return {"rows": rows, "summary": summarize(df)}
