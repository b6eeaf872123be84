import argparse
import json
import logging
import sys

from arrays_common import generate_random_array
from quicksort_trace import generate_trace, is_sorted

logger = logging.getLogger("quicksort_trace.cli")

# ============================================================
# ===================== USER SETTINGS ========================
# ============================================================

ARRAY_SIZE  = 25
VALUE_LOW   = 1
VALUE_HIGH  = 1000
JSON_INDENT = 2

LOG_FORMAT  = "%(levelname)s %(name)s: %(message)s"

# ============================================================
# ======================= ARGUMENTS ==========================
# ============================================================

def build_parser():
    p = argparse.ArgumentParser(
        prog="quicksort-trace",
        description="Generate the step-by-step quicksort trace of a number array as JSON.",
    )
    p.add_argument("--size",   type=int, default=ARRAY_SIZE, help="random array length")
    p.add_argument("--low",    type=int, default=VALUE_LOW,  help="smallest random value")
    p.add_argument("--high",   type=int, default=VALUE_HIGH, help="largest random value")
    p.add_argument("--seed",   type=int, default=None,       help="seed for the random array")
    p.add_argument("--values", default=None,
                   help="comma-separated numbers to sort instead of a random array")
    p.add_argument("-o", "--output", default=None, help="write JSON here instead of stdout")
    p.add_argument("--summary", action="store_true",
                   help="print step counts instead of the full trace")
    p.add_argument("-v", "--verbose", action="store_true")
    return p


def parse_values(text: str) -> list:
    """'5,3,8,1' -> [5, 3, 8, 1]. Integral tokens stay ints, the rest become floats."""
    out = []
    for tok in text.split(","):
        tok = tok.strip()
        if not tok:
            continue
        try:
            out.append(int(tok))
        except ValueError:
            try:
                out.append(float(tok))
            except ValueError:
                raise ValueError(f"not a number: {tok!r}") from None
    return out

# ============================================================
# ======================== OUTPUT ============================
# ============================================================

def trace_to_json(trace, indent=JSON_INDENT) -> str:
    length = len(trace[0].values) if trace else 0
    return json.dumps({"length": length, "steps": [s.to_dict() for s in trace]}, indent=indent)


def summarize(trace) -> dict:
    """Count the events in a trace. A swap step is a comparison step whose values changed."""
    comparisons = swaps = partitions = 0
    for prev, step in zip(trace, trace[1:]):
        if step.comparing_indices is not None:
            if step.values != prev.values:
                swaps += 1
            else:
                comparisons += 1
        elif step.pivot_index is not None and prev.comparing_indices is not None:
            partitions += 1
    return dict(
        length=len(trace[0].values) if trace else 0,
        steps=len(trace),
        comparisons=comparisons,
        swaps=swaps,
        partitions=partitions,
        sorted=bool(trace) and is_sorted(trace[-1].values),
    )


def _write(text, path):
    if path is None:
        sys.stdout.write(text + "\n")
        return
    with open(path, "w") as f:
        f.write(text + "\n")
    logger.info("trace written to %s", path)

# ============================================================
# ========================= MAIN =============================
# ============================================================

def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO,
                        format=LOG_FORMAT, stream=sys.stderr)

    try:
        if args.values is not None:
            arr = parse_values(args.values)
        else:
            arr = generate_random_array(args.size, args.low, args.high, seed=args.seed)
        trace = generate_trace(arr)
    except (TypeError, ValueError) as e:
        logger.error("invalid input: %s", e)
        return 2

    logger.debug("input: %s", arr)
    if args.summary:
        text = "\n".join(f"{k:<12}{v}" for k, v in summarize(trace).items())
    else:
        text = trace_to_json(trace)
    _write(text, args.output)
    return 0


def run():
    sys.exit(main())


if __name__ == "__main__":
    run()
