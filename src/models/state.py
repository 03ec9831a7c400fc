"""
Program state model and pipeline helper

Defines ProgramState dataclass for the functional pipeline pattern and
the pipeline() helper for composing transformation stages.
"""

from pathlib import Path
from argparse import Namespace
from typing import Any, Optional, Type, TypeVar, List, Callable
from dataclasses import dataclass, field
import dataclasses
from functools import reduce


PS = TypeVar("PS", bound="ProgramState")


@dataclass
class ProgramState:
    """
    Central state container for the validation pipeline (state bus pattern).

    Pipeline stages and their state additions:
        - Initial: inputdir, outputdir, verbosity, inputFile, mask, maskName,
          maskLibrary, autofill
        - env_check: inputValuesFile, reportFile, envOK
        - mask_install: picture
        - values_validate: values, report
        - results_report: (no additions, terminal stage)

    Attributes:
        inputdir: Directory containing the values file
        outputdir: Directory for the JSON report
        verbosity: Logging verbosity level (1-3)
        inputFile: Values file, one value per line (relative to inputdir)
        mask: Picture mask given on the command line
        maskName: Name of a mask in the mask library
        maskLibrary: Optional mask library YAML file
        autofill: Validate as typed input with autofill instead of committing
        envOK: Environment validation passed
        inputValuesFile: Resolved path to the values file
        reportFile: Path of the JSON report
        picture: Installed (syntax-checked) picture mask
        values: Values read from the values file
        report: ValidationReport built by values_validate
    """

    # CLI arguments
    inputdir: Optional[Path] = field(default=None)
    outputdir: Optional[Path] = field(default=None)
    verbosity: int = field(default=1)
    inputFile: str = field(default="")
    mask: Optional[str] = field(default=None)
    maskName: Optional[str] = field(default=None)
    maskLibrary: Optional[str] = field(default=None)
    autofill: bool = field(default=False)

    # Pipeline state
    envOK: bool = field(default=False)
    inputValuesFile: Path = field(default=Path("/"))
    reportFile: Path = field(default=Path("/"))
    picture: str = field(default="")
    values: List[str] = field(default_factory=list)
    report: Optional[Any] = field(default=None)  # ValidationReport at runtime

    @classmethod
    def state_createFromNamespace(
        cls: Type["ProgramState"], options: Namespace, inputdir: Path, outputdir: Path
    ) -> "ProgramState":
        """
        Create ProgramState from argparse Namespace and directory paths.

        Args:
            options: Parsed CLI arguments (inputFile, mask, maskName, ...)
            inputdir: Directory containing the values file
            outputdir: Directory for the report

        Returns:
            ProgramState instance with all known CLI options as attributes
        """
        valid_fields = {f.name for f in dataclasses.fields(cls)}
        filtered_options = {k: v for k, v in vars(options).items() if k in valid_fields}
        merged_args = {**filtered_options, "inputdir": inputdir, "outputdir": outputdir}
        return cls(**merged_args)

    def copy(self: PS) -> PS:
        """
        Creates a shallow copy of the ProgramState instance.

        Returns:
            A new ProgramState instance.
        """
        return type(self)(**self.__dict__)


def pipeline(
    initial_state: ProgramState, *stages: Callable[[ProgramState], ProgramState]
) -> ProgramState:
    """
    Execute a functional pipeline of state transformations.

    Each stage is a function (ProgramState) -> ProgramState that receives
    the output of the previous stage and returns a new state.

    Example:
        final_state = pipeline(
            initial_state,
            env_check,
            mask_install,
            values_validate,
            results_report
        )
    """
    return reduce(lambda state, stage: stage(state), stages, initial_state)
