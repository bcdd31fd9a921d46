# ── src/resequencer/utility/utils.py ──────────────────────────────────
from __future__ import annotations

import copy
import errno
import logging
import logging.handlers
import os
import secrets
import sys
import yaml
from pathlib import Path
import datetime as dt

# ── locate repo root & default paths  ─────────────────────────────────
def _find_repo_root(start: Path | None = None) -> Path:
    """Walk parents until we see pyproject.toml or .git."""
    here = start or Path(__file__).resolve()
    for p in [here, *here.parents]:
        if (p / "pyproject.toml").exists() or (p / ".git").exists():
            return p
    return Path(__file__).resolve().parents[1]       # site-packages wheel

ROOT      = _find_repo_root()
LOG_ROOT  = ROOT / "logs"
CONF_PATH = ROOT / "config" / "config.yaml"

DEFAULTS: dict = {
    "assembly": {"separator": ":", "leftmost_only": True},
    "output": {"names_per_line": 5, "line_width": 0},
}

# ── config  ────────────────────────────────────────────────────────────
def _merge(base: dict, over: dict) -> dict:
    out = copy.deepcopy(base)
    for key, val in (over or {}).items():
        if isinstance(val, dict) and isinstance(out.get(key), dict):
            out[key] = _merge(out[key], val)
        else:
            out[key] = val
    return out

def load_config(path: str | Path | None = None) -> dict:
    """
    Read the YAML config and lay it over DEFAULTS.

    Path priority: argument, $RESEQ_CONFIG, config/config.yaml in the repo.
    A missing default file just yields DEFAULTS (installed wheels ship none);
    a missing explicit path is an error.
    """
    explicit = path or os.getenv("RESEQ_CONFIG")
    cfg_path = Path(explicit).expanduser() if explicit else CONF_PATH
    if not cfg_path.exists():
        if explicit:
            raise FileNotFoundError(cfg_path)
        return copy.deepcopy(DEFAULTS)
    with cfg_path.open() as fh:
        return _merge(DEFAULTS, yaml.safe_load(fh) or {})

# ── logging  ───────────────────────────────────────────────────────────
def setup_logging(
    log_dir: str | Path | None = LOG_ROOT,
    *,
    level: int | None = None,
    console: bool = True,
    force: bool = False,
    max_bytes: int | None = None,
    backup_count: int = 0,
    session_env: str = "RESEQ_SESSION_ID",
    log_file_prefix: str = "reseq",
) -> Path:
    """
    Create one log file called 'reseq_<SESSION_ID>.log'.

    SESSION_ID is $RESEQ_SESSION_ID when set, otherwise an auto-generated
    'YYYYMMDD-HHMMSS-<4-hex>'. $RESEQ_LOG_FILE names the file outright and
    $RESEQ_LOG_DIR replaces a None log_dir. With max_bytes the file rotates
    and keeps backup_count old copies.
    """
    if os.getenv("RESEQ_LOG_FILE"):
        logfile = Path(os.getenv("RESEQ_LOG_FILE")).expanduser()
        logfile.parent.mkdir(parents=True, exist_ok=True)
    else:
        root_dir = (
            Path(log_dir).expanduser()
            if log_dir is not None
            else Path(os.getenv("RESEQ_LOG_DIR", LOG_ROOT)).expanduser()
        )
        root_dir.mkdir(parents=True, exist_ok=True)

        sess_id = os.getenv(session_env)
        if not sess_id:
            ts = dt.datetime.now().strftime("%Y%m%d-%H%M%S")
            sess_id = f"{ts}-{secrets.token_hex(2)}"
        logfile = root_dir / f"{log_file_prefix}_{sess_id}.log"

    # ── short-circuit if already configured ---------------------------
    root_logger = logging.getLogger()
    if root_logger.handlers and not force:
        return logfile

    root_logger.handlers.clear()
    root_logger.setLevel(level or logging.INFO)

    fmt = logging.Formatter("%(asctime)s  %(levelname)-7s  %(name)s:  %(message)s")

    if max_bytes:
        fh = logging.handlers.RotatingFileHandler(
            logfile, maxBytes=max_bytes, backupCount=backup_count,
            encoding="utf-8", delay=True
        )
    else:
        fh = logging.FileHandler(logfile, mode="a", encoding="utf-8", delay=True)

    fh.setFormatter(fmt)
    root_logger.addHandler(fh)

    if console:
        ch = logging.StreamHandler(sys.stderr)
        ch.setFormatter(fmt)
        root_logger.addHandler(ch)

    # ── refresh _latest symlink ---------------------------------------
    latest = logfile.parent / f"{log_file_prefix}_latest.log"
    try:
        if latest.is_symlink() or latest.exists():
            latest.unlink()
        latest.symlink_to(logfile.name)          # relative link
    except OSError as e:
        if e.errno not in (errno.EPERM, errno.EACCES, errno.EEXIST):
            raise

    root_logger.debug("Logging to %s", logfile)
    return logfile
