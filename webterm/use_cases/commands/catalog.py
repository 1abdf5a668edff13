"""
Default command table of a terminal session, in help order.
"""

from typing import Sequence

from webterm.entities.command import Command, CommandHandler, PipeHandler
from webterm.use_cases.commands import text_filters
from webterm.use_cases.commands.builtin_commands import BuiltinCommands
from webterm.use_cases.commands.remote_commands import RemoteCommands


def _standalone(pipe_handler: PipeHandler) -> CommandHandler:
    """Run a text filter outside a pipeline, on empty input."""

    async def handler(args: Sequence[str]) -> str:
        return pipe_handler(args, "")

    return handler


def _filter_command(
    name: str, description: str, usage: str, pipe_handler: PipeHandler
) -> Command:
    return Command(
        name=name,
        description=description,
        usage=usage,
        handler=_standalone(pipe_handler),
        pipe_handler=pipe_handler,
    )


def build_command_table(
    builtins: BuiltinCommands, remote: RemoteCommands
) -> list[Command]:
    """
    Build the default commands.

    Args:
        builtins: Handlers working on the session state
        remote: Handlers backed by the remote service

    Returns:
        Commands in registration order
    """
    return [
        Command("help", "Mostra tutti i comandi disponibili", builtins.help),
        Command("clear", "Pulisce lo schermo del terminale", builtins.clear),
        Command(
            "ls",
            "Lista i file e le directory",
            builtins.ls,
            usage="ls [opzioni] [directory]",
        ),
        Command("pwd", "Mostra la directory corrente", builtins.pwd),
        Command("cd", "Cambia directory", builtins.cd, usage="cd [directory]"),
        Command("whoami", "Mostra il nome utente corrente", builtins.whoami),
        Command(
            "echo",
            "Visualizza il testo passato come argomento",
            builtins.echo,
            usage="echo [testo]",
        ),
        Command("date", "Mostra la data e ora corrente", builtins.date),
        Command(
            "ping", "Verifica la connettività di rete", remote.ping, usage="ping [host]"
        ),
        Command("system-info", "Mostra informazioni sul sistema", remote.system_info),
        Command("api-test", "Testa la connessione alle API", remote.api_test),
        Command(
            "mkdir", "Crea una nuova directory", builtins.mkdir, usage="mkdir [nome]"
        ),
        Command("touch", "Crea un nuovo file", builtins.touch, usage="touch [nome]"),
        _filter_command(
            "grep", "Cerca pattern nel testo", "grep [pattern]", text_filters.grep
        ),
        _filter_command(
            "wc", "Conta linee, parole e caratteri", "wc", text_filters.wc
        ),
        _filter_command(
            "head", "Mostra prime n linee", "head [-n]", text_filters.head
        ),
        _filter_command(
            "tail", "Mostra ultime n linee", "tail [-n]", text_filters.tail
        ),
        Command("history", "Mostra la cronologia dei comandi", builtins.history),
        Command(
            "lista", "Mostra tutte le entità disponibili dal backend", remote.lista
        ),
    ]
