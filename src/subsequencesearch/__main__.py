import click
import os
import subprocess
import shlex
from subsequencesearch.search import SubsequenceSearch
from subsequencesearch.sequencepasses import covers_candidates
import traceback


def validate_delimiter(ctx, param, value):
    if not value:
        raise click.BadParameter("delimiter must not be empty")
    return value.encode()


@click.command()
@click.argument("inputfile")
@click.argument("testcommand")
@click.option("--delimiter", default="\n", callback=validate_delimiter)
@click.option("--target", default="")
@click.option("--max-evaluations", default=1000)
@click.option("--timeout", default=1.0)
@click.option("--debug/--no-debug", default=False)
def main(inputfile, testcommand, delimiter, target, max_evaluations, timeout, debug):
    testcommand = shlex.split(testcommand)

    with open(inputfile, "rb") as i:
        data = i.read()

    # A single trailing delimiter terminates the last part rather than
    # starting an empty one, and is restored in the output.
    terminated = data.endswith(delimiter)
    if terminated:
        data = data[: -len(delimiter)]
    parts = data.split(delimiter)

    env = dict(os.environ, SUBSEQUENCE_TARGET=target)

    def predicate(target, candidate):
        try:
            return (
                subprocess.run(
                    testcommand,
                    input=delimiter.join(candidate),
                    stdout=subprocess.DEVNULL,
                    stderr=subprocess.DEVNULL,
                    timeout=timeout,
                    env=env,
                ).returncode
                == 0
            )
        except subprocess.TimeoutExpired:
            return False

    if debug and not covers_candidates(max_evaluations, len(parts)):
        click.echo(
            f"Budget of {max_evaluations} covers only part of the 2^{len(parts)} - 1 candidates"
        )

    search = SubsequenceSearch(target, parts, predicate, max_evaluations, debug=debug)
    try:
        result = search.run()
    except KeyboardInterrupt:
        traceback.print_exc()
        raise

    if not result:
        reason = "budget exhausted" if search.budget_exhausted else "search complete"
        raise click.ClickException(
            f"No matching subsequence after {search.evaluations} evaluations ({reason})"
        )

    with open(inputfile + ".found", "wb") as o:
        o.write(delimiter.join(result))
        if terminated:
            o.write(delimiter)
    click.echo(f"Kept {len(result)} of {len(parts)} parts in {inputfile}.found")


if __name__ == "__main__":
    main()
