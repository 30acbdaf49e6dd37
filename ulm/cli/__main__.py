"""Module entry point for `python -m ulm.cli`."""

if __name__ == "__main__":  # pragma: no cover (invocation driven)
    from ulm.cli import cli

    cli()
