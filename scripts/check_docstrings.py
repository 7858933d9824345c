"""Check that public functions have a docstring with properly closed code blocks and a doctest."""

import ast
import re
from pathlib import Path
from typing import TYPE_CHECKING, Annotated, NamedTuple

import rich
import rich.table
import rich.text
import typer

import pyosum as ps

if TYPE_CHECKING:
    from typing import TypeIs

SRC_DIR = Path().joinpath("src", "pyosum")
CODE_BLOCK_PATTERN = re.compile(r"^```(\w*)", re.MULTILINE)
SKIP_DECORATORS = frozenset(
    {"overload", "override", "no_doctest", "wraps", "deprecated", "abstractmethod"}
)

app = typer.Typer(help="Docstring checks for pyosum developments.")


class DocstringError(NamedTuple):
    """Error found in a docstring."""

    file_path: Path
    func_name: str
    line_no: int
    error_line_no: int
    errors: list[str]


class ErrorDetail(NamedTuple):
    """Detail of an error with its line number."""

    line_no: int
    message: str


class State(NamedTuple):
    """State during code block traversal."""

    errors: tuple[ErrorDetail, ...]
    stack: tuple[tuple[int, str], ...]

    def to_blocks(self, start_line: int) -> list[ErrorDetail]:
        """Convert unclosed blocks in the stack to error details."""
        return [
            *self.errors,
            *(
                ErrorDetail(
                    line_no=start_line + idx - 1, message=f"Unclosed ```{lang} block"
                )
                for idx, lang in self.stack
            ),
        ]


def check_file(file_path: Path) -> list[DocstringError]:
    """Check every function of **file_path**; a file with a syntax error yields no error.

    Errors raised while reading the file propagate.
    """
    source = file_path.read_text(encoding="utf-8")
    try:
        tree = ast.parse(source)
    except SyntaxError:
        return []
    return _check_tree(file_path, tree)


def _check_tree(file_path: Path, tree: ast.Module) -> list[DocstringError]:
    top_level = {id(node) for node in tree.body}
    return ps.compact(
        _process_node(file_path, node, top_level=id(node) in top_level)
        for node in ast.walk(tree)
        if _is_documentable(node) and not _has_skip_decorator(node)
    )


def _is_documentable(
    node: ast.AST,
) -> "TypeIs[ast.FunctionDef | ast.AsyncFunctionDef]":
    return isinstance(node, (ast.FunctionDef, ast.AsyncFunctionDef))


def _is_public(node: ast.FunctionDef | ast.AsyncFunctionDef) -> bool:
    return not node.name.startswith("_") and not node.name.istitle()


def _process_node(
    file_path: Path,
    node: ast.FunctionDef | ast.AsyncFunctionDef,
    *,
    top_level: bool,
) -> ps.Option[DocstringError]:
    def _missing() -> ps.Option[DocstringError]:
        if not (top_level and _is_public(node)):
            return ps.NONE
        return ps.Some(
            DocstringError(
                file_path=file_path,
                func_name=node.name,
                line_no=node.lineno,
                error_line_no=node.lineno,
                errors=["Missing docstring"],
            )
        )

    def _to_error(errors: list[ErrorDetail]) -> ps.Option[DocstringError]:
        return ps.Some(
            DocstringError(
                file_path=file_path,
                func_name=node.name,
                line_no=node.lineno,
                error_line_no=errors[0].line_no,
                errors=[e.message for e in errors],
            )
        )

    return ps.from_nullable(ast.get_docstring(node)).fold(
        _missing,
        lambda docstring: check_code_blocks(
            docstring, node.lineno, node.name, require_example=top_level
        ).fold(_to_error, lambda _: ps.NONE),
    )


def _has_skip_decorator(node: ast.FunctionDef | ast.AsyncFunctionDef) -> bool:
    """Check if function has a decorator that should skip docstring check."""
    return any(
        (isinstance(d, ast.Name) and d.id in SKIP_DECORATORS)
        or (isinstance(d, ast.Attribute) and d.attr in SKIP_DECORATORS)
        or (
            isinstance(d, ast.Call)
            and isinstance(d.func, ast.Name)
            and d.func.id in SKIP_DECORATORS
        )
        for d in node.decorator_list
    )


def _process_line(state: State, start_line: int, line_num: int, line: str) -> State:
    marker = "```"
    match = CODE_BLOCK_PATTERN.search(line.strip())
    if not match:
        return state
    language = match.group(1) or "plaintext"
    if line.strip() == marker:
        if state.stack:
            return State(errors=state.errors, stack=state.stack[:-1])
        return State(
            errors=(
                *state.errors,
                ErrorDetail(
                    line_no=start_line + line_num,
                    message="Closing block ``` without matching opening",
                ),
            ),
            stack=state.stack,
        )
    return State(errors=state.errors, stack=(*state.stack, (line_num + 1, language)))


def check_code_blocks(
    docstring: str, start_line: int, func_name: str, *, require_example: bool = True
) -> ps.Either[list[ErrorDetail], None]:
    """Check that all code blocks in **docstring** are closed and that a python block exists.

    Methods, private functions and docstrings holding a `@no_doctest` flag don't need a python block.
    """
    lines = docstring.split("\n")
    state = State(errors=(), stack=())
    for line_num, line in enumerate(lines):
        state = _process_line(state, start_line, line_num, line)
    block_errors = state.to_blocks(start_line)
    has_python_block = any(
        CODE_BLOCK_PATTERN.search(line.strip()) and "python" in line for line in lines
    )
    should_skip = (
        not require_example
        or func_name.startswith("_")
        or func_name.istitle()
        or "@no_doctest" in docstring
        or has_python_block
    )
    if not should_skip:
        block_errors.append(
            ErrorDetail(
                line_no=start_line,
                message="Missing doctest: No ```python block found in docstring",
            )
        )
    if block_errors:
        return ps.Left(block_errors)
    return ps.Right(None)


@app.command()
def main(
    src: Annotated[
        Path, typer.Option("--src", help="Directory holding the sources to check.")
    ] = SRC_DIR,
) -> None:
    """Check all docstrings in the project."""
    rich.print(
        rich.text.Text(
            "Checking docstrings for properly closed code blocks...", style="cyan bold"
        )
    )
    files = sorted(src.rglob("*.py"))
    rich.print(f"Checking {len(files)} py files...")
    all_errors = [error for path in files for error in check_file(path)]

    if not all_errors:
        rich.print(rich.text.Text("[OK] No issues found!", style="green"))
        return

    table = rich.table.Table(title="Issues Found", show_header=True)
    table.add_column("File", style="cyan")
    table.add_column("Function", style="magenta")
    table.add_column("Error", style="red")
    for error in all_errors:
        table.add_row(
            f"{error.file_path}:{error.error_line_no}",
            error.func_name,
            "\n".join(error.errors),
        )
    rich.print(table)
    rich.print(
        rich.text.Text(f"\n[FAILED] Found {len(all_errors)} issue(s)", style="red")
    )
    raise typer.Exit(code=1)


if __name__ == "__main__":
    app()
