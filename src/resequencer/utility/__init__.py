"""Support helpers: FASTA I/O, reports, config, logging and progress bars."""
