#!/usr/bin/env python3
"""
picmask - Picture mask validation

Validates a file of values, one per line, against a Paradox-style picture
mask and writes a JSON report.

As an aside, this codebase leverages the ChRIS "plugin" concept/pattern as
general purpose python app development framework.

Picture masks:
    #  digit              ?  letter            &  letter, uppercased
    !  any, uppercased    @  any character     ;  take next character literally
    *  repetition (*N repeats exactly N times)
    [] optional           {} alternatives, separated by ','
    anything else is a literal

Usage:
    picmask inputdir/ outputdir/ --inputFile values.txt --mask '##/##/##[##]'

Examples:
    # Commit-time validation against an explicit mask
    picmask . out/ --inputFile dates.txt --mask '##/##/##[##]'

    # Named mask from the built-in library, as-typed validation with autofill
    picmask . out/ --inputFile colours.txt --maskName colour --autofill

    # Own mask library, verbose output
    picmask . out/ --inputFile phones.txt --maskName phone --maskLibrary masks.yaml -vv
"""

import sys
from pathlib import Path
from argparse import ArgumentParser, Namespace, ArgumentDefaultsHelpFormatter

from chris_plugin import chris_plugin
from .config import appsettings
from .lib import (
    __version__,
    LOG,
    state_connectToLogger,
    MaskLibrary,
    MaskLibraryError,
    mask_highlight,
    run_commit,
    run_interactive,
    syntax_diagnose,
)
from .models import ProgramState, pipeline, TextBuffer, ValidationReport, ValueResult


DISPLAY_TITLE = r"""
        _
  _ __ (_) ___ _ __ ___   __ _ ___| | __
 | '_ \| |/ __| '_ ` _ \ / _` / __| |/ /
 | |_) | | (__| | | | | | (_| \__ \   <
 | .__/|_|\___|_| |_| |_|\__,_|___/_|\_\
 |_|
  Picture mask validation
"""

# Define CLI arguments
parser = ArgumentParser(
    description="picmask - validate values against a picture mask",
    formatter_class=ArgumentDefaultsHelpFormatter,
)

parser.add_argument(
    "--inputFile", required=True, type=str, help="Values file, one value per line (relative to inputdir)"
)

parser.add_argument(
    "--mask",
    default=None,
    type=str,
    help="Picture mask to validate against",
)

parser.add_argument(
    "--maskName",
    default=None,
    type=str,
    help="Name of a mask in the mask library (alternative to --mask)",
)

parser.add_argument(
    "--maskLibrary",
    default=None,
    type=str,
    help="Mask library YAML file. Defaults to the built-in library",
)

parser.add_argument(
    "--autofill",
    action="store_true",
    default=False,
    help="Validate values as typed input, autofilling literal characters",
)

parser.add_argument(
    "-v",
    "--verbosity",
    action="count",
    default=1,
    help="Increase output verbosity (can be repeated: -v, -vv)",
)

parser.add_argument("-V", "--version", action="version", version=f"%(prog)s {__version__}")


def env_check(inputstate: ProgramState) -> ProgramState:
    """
    Validate environment and resolve all file paths.

    Args:
        inputstate: Initial program state with CLI options

    Returns:
        ProgramState with added fields:
            - inputValuesFile: Resolved path to the values file
            - reportFile: Path of the JSON report (output directory created)
            - envOK: True if environment is valid

    Exits:
        1 if the values file is missing or neither/both of --mask and
        --maskName are given
    """
    state = inputstate.copy()

    if state.verbosity >= 2:
        LOG(DISPLAY_TITLE, level=2)

    LOG("Checking environment...", level=2)

    if (state.mask is None) == (state.maskName is None):
        print("Error: specify exactly one of --mask and --maskName", file=sys.stderr)
        state.envOK = False
        sys.exit(1)

    values_file = state.inputdir / state.inputFile
    if not values_file.is_file():
        print(f"Error: Input file not found: {values_file}", file=sys.stderr)
        state.envOK = False
        sys.exit(1)

    state.inputValuesFile = values_file
    LOG(f"Input file: {values_file}", level=2)

    state.outputdir.mkdir(parents=True, exist_ok=True)
    state.reportFile = state.outputdir / appsettings.report_filename
    LOG(f"Report file: {state.reportFile}", level=2)

    state.envOK = True
    return state


def mask_install(inputstate: ProgramState) -> ProgramState:
    """
    Resolve and syntax-check the picture mask.

    A malformed mask is an authoring error: it is reported once, here, and
    never reaches the matcher.

    Args:
        inputstate: Program state with mask or maskName set

    Returns:
        ProgramState with added field:
            - picture: The checked picture mask

    Exits:
        1 if the library cannot be loaded, the name is unknown, or the mask
        is malformed
    """
    state = inputstate.copy()

    if state.maskName is not None:
        try:
            library = MaskLibrary(Path(state.maskLibrary) if state.maskLibrary else None)
            picture = library.picture_get(state.maskName)
        except MaskLibraryError as e:
            print(f"Mask library error: {e}", file=sys.stderr)
            sys.exit(1)
        LOG(f"Mask '{state.maskName}' from {library.path}", level=2)
    else:
        picture = state.mask or ""

    issue = syntax_diagnose(picture)
    if issue is not None:
        print(
            f"Mask syntax error: {issue.reason}\n"
            f"  {picture}\n"
            f"  {' ' * issue.position}^",
            file=sys.stderr,
        )
        sys.exit(1)

    state.picture = picture
    LOG(f"Mask: {mask_highlight(picture, appsettings.highlight_background)}", level=2)
    return state


def values_validate(inputstate: ProgramState) -> ProgramState:
    """
    Validate every value of the values file against the picture.

    Commit mode (default) checks finished values: only complete matches and
    empty lines pass. With --autofill, each value is treated as typed input:
    incomplete values pass and literal characters are filled in.

    Args:
        inputstate: Program state with picture and inputValuesFile

    Returns:
        ProgramState with added fields:
            - values: Lines read from the values file
            - report: ValidationReport with one entry per value

    Exits:
        1 if the values file cannot be read
    """
    state = inputstate.copy()

    try:
        state.values = state.inputValuesFile.read_text(encoding="utf-8").splitlines()
    except (OSError, UnicodeDecodeError) as e:
        print(f"Error reading input file: {e}", file=sys.stderr)
        sys.exit(1)

    LOG(f"Validating {len(state.values)} values...", level=1)

    report = ValidationReport(
        picture=state.picture, mode="interactive" if state.autofill else "commit"
    )

    for line, value in enumerate(state.values, start=1):
        if state.autofill:
            buffer = TextBuffer.from_text(value)
            status = run_interactive(state.picture, buffer, autofill=True)
            accepted = status.input_acceptable
            text = buffer.text
        else:
            status = run_commit(state.picture, value)
            accepted = status.commit_acceptable
            text = value

        report.results.append(
            ValueResult(line=line, value=value, status=status, accepted=accepted, text=text)
        )
        LOG(f"{line:>4}: '{value}' → {status.value}", level=2)

    state.report = report
    return state


def results_report(inputstate: ProgramState) -> ProgramState:
    """
    Write the JSON report and display a summary.

    Args:
        inputstate: Program state with report populated

    Returns:
        ProgramState unchanged (terminal pipeline stage)

    Exits:
        1 if there is no report or it cannot be written
    """
    state: ProgramState = inputstate.copy()
    if state.report is None:
        print("Error: Validation failed", file=sys.stderr)
        sys.exit(1)

    try:
        state.reportFile.write_text(state.report.model_dump_json(indent=2), encoding="utf-8")
    except OSError as e:
        print(f"Error writing report: {e}", file=sys.stderr)
        sys.exit(1)

    LOG("\n✓ Validation complete", level=1)
    LOG(f"  Accepted: {state.report.accepted_count}", level=1)
    LOG(f"  Rejected: {state.report.rejected_count}", level=1)
    for status, count in sorted(state.report.statusCounts_get().items()):
        LOG(f"    {status:<10} {count}", level=2)
    LOG(f"  Report:   {state.reportFile}", level=1)
    return state


@chris_plugin(
    parser=parser,
    title="picmask - Picture mask validation",
    category="Utility",
    min_memory_limit="100Mi",
    min_cpu_limit="500m",
)
def main(options: Namespace, inputdir: Path, outputdir: Path):
    """
    Main entry point - validate a values file against a picture mask.

    Orchestrates the full validation pipeline:
        1. env_check: Validate paths and options
        2. mask_install: Resolve and syntax-check the mask
        3. values_validate: Match every value
        4. results_report: Write report, display summary

    Note:
        This function is wrapped by @chris_plugin which handles CLI
        argument parsing and invokes this function with parsed values.
    """
    state: ProgramState = ProgramState.state_createFromNamespace(
        options=options, inputdir=inputdir, outputdir=outputdir
    )

    # Connect state to logger for entire pipeline
    state_connectToLogger(state)

    pipeline(state, env_check, mask_install, values_validate, results_report)


if __name__ == "__main__":
    main()  # type: ignore  # @chris_plugin decorator transforms signature
