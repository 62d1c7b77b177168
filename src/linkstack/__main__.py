## linkstack — Copyright © 2025, Alex J. Champandard.  Licensed under AGPLv3; see LICENSE! ⚘
#
# linkstack — A stack built from linked nodes, with a tiny command language to drive it.
#

import sys
import time
import traceback
from dataclasses import dataclass

import click

from .errors import StackError, CommandParseError, IncompleteCommand, EmptyStructureError
from .parser import format_source_context
from .formatting import write_without_ansi, format_command
from .runtime import Runtime
from .demo import run_demo


@dataclass(frozen=True)
class RuntimeConfig:
    verbose: int
    ignore: bool
    stats: bool
    plain: bool


class StackRunner:
    """Runs scripts against one shared stack and reports failures with their source."""

    def __init__(self, config: RuntimeConfig):
        self.config = config
        self.runtime = Runtime()
        self.stats = {'steps': 0, 'deepest': 0} if config.stats else None
        self.started = time.time()
        self.failure = False

    def _report(self, banner: str, detail: str, exc: Exception, context: str = '') -> None:
        print(f'\033[30;43m {banner} \033[0m {detail} (Exception: \033[33m{type(exc).__name__}\033[0m)\n{context}', file=sys.stderr)

    def _handle_exception(self, exc: Exception, source: str, filename: str) -> None:
        if isinstance(exc, CommandParseError):
            context = format_source_context(exc.meta, exc.token, source=source)
            self._report("SYNTAX ERROR.", f"Parsing `\033[97m{filename}\033[0m` caused a problem!", exc,
                         context + f"\033[90m{' '.join(str(exc).split())}\033[0m\n")
        elif isinstance(exc, EmptyStructureError):
            command = exc.command
            name = format_command(command) if command is not None else exc.stack_op
            context = format_source_context(command.meta, command.name, source=source) if command is not None else ''
            if exc.stack is not None:
                context += f'\033[1;33m  Stack content is\033[0;33m\n    {exc.stack.describe()}\033[0m\n'
            self._report("STACK UNDERFLOW.", f"Command `\033[1;97m{name}\033[0m` from `\033[97m{filename}\033[0m` found nothing to take: {exc}", exc, context)
        elif isinstance(exc, StackError):
            self._report("STACK ERROR.", str(exc), exc)
        else:
            self._report("RUNTIME ERROR.", f"Running `\033[97m{filename}\033[0m` caused an error!", exc)
            traceback.print_exc()

    def run_script(self, source: str, filename: str) -> None:
        try:
            self.runtime.run(source, filename=filename, verbosity=self.config.verbose, stats=self.stats)
        except Exception as exc:
            self._handle_exception(exc, source, filename)
            self.failure = True
            if not self.config.ignore: sys.exit(1)

    def _prompt(self, pending: str) -> str:
        if pending:
            return "\033[36m  ... \033[0m"
        return f"\033[36m[{self.runtime.stack.size()}] <<< \033[0m"

    def repl(self) -> None:
        """Interactive session; errors are shown but never end it, nor the exit status."""
        if sys.platform != "win32": import readline

        print('linkstack - Linked stack REPL; type `quit` or Ctrl+D to exit.')
        pending = ""
        while True:
            try:
                line = input(self._prompt(pending))
            except (KeyboardInterrupt, EOFError):
                print(""); break
            if line.strip() in ('quit', 'exit'): break
            if not line.strip(): continue

            pending += line + "\n"
            try:
                self.runtime.run(pending, filename='<REPL>', verbosity=self.config.verbose, stats=self.stats)
            except IncompleteCommand:
                # e.g. a bare `push`; keep reading its values on the next line.
                continue
            except Exception as exc:
                self._handle_exception(exc, pending, '<REPL>')
            pending = ""

    def finalize(self) -> int:
        if self.stats is not None:
            print(f"\n\033[97m\033[48;5;30m STATISTICS. \033[0m")
            print(f"commands\t\033[97m{self.stats['steps']:,}\033[0m")
            print(f"deepest\t\t\033[97m{self.stats['deepest']:,}\033[0m")
            print(f"time\t\t\033[97m{time.time() - self.started:.3f}s\033[0m")
        return 1 if self.failure else 0


def _check_scripts(ctx: click.Context, param: click.Parameter, scripts: tuple) -> tuple:
    for script in scripts:
        if script.name != '<stdin>' and not script.name.endswith('.stk'):
            raise click.BadParameter(f"Expected `.stk` script file, got `{script.name}`.")
    return scripts


@click.group()
@click.option('--verbose', '-v', default=0, count=True, envvar='LINKSTACK_VERBOSE', help='Trace every command with the stack it runs on.')
@click.option('--ignore', '-i', is_flag=True, help='Ignore errors and continue executing.')
@click.option('--stats', is_flag=True, help='Display execution statistics (commands run, deepest stack).')
@click.option('--plain', '-p', is_flag=True, help='Strip ANSI color codes and redirect stderr to stdout.')
@click.pass_context
def cli(ctx: click.Context, verbose: int, ignore: bool, stats: bool, plain: bool) -> None:
    ctx.ensure_object(dict)
    ctx.obj['config'] = RuntimeConfig(verbose=verbose, ignore=ignore, stats=stats, plain=plain)

    if plain:
        writer = write_without_ansi(sys.stdout.write)
        sys.stdout.write, sys.stderr.write = writer, writer


@cli.command('demo')
def demo() -> None:
    """Print the push/peek/pop walkthrough."""
    run_demo()


@cli.command('run')
@click.argument('scripts', nargs=-1, type=click.File('r', encoding='utf-8'), callback=_check_scripts)
@click.option('--command', '-c', 'commands', multiple=True, help='Inline commands, e.g. "push 1 2; pop".')
@click.option('--repl', '-r', is_flag=True, help='Continue interactively once scripts and commands are done.')
@click.pass_context
def run(ctx: click.Context, scripts: tuple, commands: tuple[str, ...], repl: bool) -> None:
    """Run `.stk` scripts, then inline commands, all on the same stack."""
    runner = StackRunner(ctx.obj['config'])
    for script in scripts:
        runner.run_script(script.read(), script.name)
    for index, source in enumerate(commands, start=1):
        runner.run_script(source, f'<INPUT_{index}>')
    if repl or not (scripts or commands):
        runner.repl()
    ctx.exit(runner.finalize())


def main(argv: list[str] | None = None) -> None:
    args = list(sys.argv[1:] if argv is None else argv)
    flags = [t for t in args if t in ('--verbose', '--ignore', '--stats', '--plain', '-i', '-p') or t.startswith('-v')]
    rest = [t for t in args if t not in flags]

    # Bare invocations default to `run`; piped input is read as a script.
    if not rest and not sys.stdin.isatty():
        rest = ['-']
    if not (rest and rest[0] in cli.commands):
        rest = ['run', *rest]
    cli.main(args=[*flags, *rest], prog_name='linkstack')


if __name__ == "__main__":
    main()
