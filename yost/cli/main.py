"""Main CLI application using Cyclopts."""

import cyclopts

from yost.cli.commands import db, server

app = cyclopts.App(
    name="yost",
    help="YOST - cooldown-gated record store",
)

app.command(db.app, name="db")
app.command(server.app, name="server")


def main() -> None:
    app()


if __name__ == "__main__":
    main()
