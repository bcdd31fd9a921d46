# src/resequencer/reseq.py
from __future__ import annotations
import argparse, logging, sys
from resequencer.assembly.models import AssemblyFailed, InputUnavailable
from resequencer.pipeline import run_assemble, run_seeds
from resequencer.utility.utils import setup_logging, load_config


def main(argv: list[str] | None = None) -> None:
    ap = argparse.ArgumentParser(
        prog="reseq",
        description="FASTA resequencer: rebuild one DNA sequence by chaining overlapping fragments")
    ap.add_argument("-v", "--verbose", action="count", default=0,
                    help="-v: seed pairs, per-seed outcome and segment listing, -vv: debug every extension")
    ap.add_argument("--config", metavar="YAML", default=None,
                    help="Config file (default: $RESEQ_CONFIG or config/config.yaml)")
    ap.add_argument("--log-dir", default=None, help="Folder for session log files")
    sp = ap.add_subparsers(dest="cmd", required=True)

    # assemble
    p_asm = sp.add_parser("assemble", help="Reconstruct one sequence from overlapping fragments")
    p_asm.add_argument("-i", "--input", required=True, metavar="FASTA", help="Fragments in FASTA format")
    p_asm.add_argument("-o", "--output", metavar="FASTA", help="Also write the rebuilt sequence here")
    p_asm.add_argument("--attempts-tsv", metavar="PATH",
                       help="Write one row per attempted seed pair (outcome success/dead-end)")
    p_asm.add_argument("--separator", default=None,
                       help="Single reserved character joining segment names (default from config: ':')")

    # seeds
    p_seed = sp.add_parser("seeds", help="List the candidate seed pairs only")
    p_seed.add_argument("-i", "--input", required=True, metavar="FASTA")
    p_seed.add_argument("--separator", default=None)

    args = ap.parse_args(argv)

    LEVEL = {0: logging.WARNING, 1: logging.INFO}.get(args.verbose, logging.DEBUG)
    setup_logging(args.log_dir, level=LEVEL)

    try:
        cfg = load_config(args.config)
        if args.cmd == "assemble":
            rc = run_assemble(
                args.input,
                args.output,
                attempts_tsv=args.attempts_tsv,
                verbose=args.verbose > 0,
                separator=args.separator,
                cfg=cfg,
            )
        else:
            rc = run_seeds(args.input, separator=args.separator, cfg=cfg)
    except (InputUnavailable, AssemblyFailed, ValueError, FileNotFoundError) as exc:
        logging.error("%s", exc)
        sys.exit(1)
    sys.exit(rc)


if __name__ == "__main__":
    main()
