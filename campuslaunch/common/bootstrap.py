"""Launcher pipeline wiring shared by the client and server entry points."""

from __future__ import annotations

import argparse
import logging
import os
import sys
from pathlib import Path
from typing import Callable, Mapping, Sequence

import yaml

from campuslaunch.common.config import Config, ConfigLoader
from campuslaunch.common.credentials import (
    credentialSource_require,
    keyMaterial_verify,
    launchOptions_resolve,
)
from campuslaunch.common.defaults import options_merge
from campuslaunch.common.environment import (
    assignmentValue_display,
    environment_materialize,
    environmentSummary_format,
)
from campuslaunch.common.errors import EXIT_OK, EXIT_USAGE, LaunchError, UsageError
from campuslaunch.common.launch_target import launchAction_dispatch, launchTarget_resolve
from campuslaunch.common.launcher_logging import logging_setup
from campuslaunch.common.settings import settings
from campuslaunch.common.types import (
    EnvironmentPlan,
    LaunchAction,
    LaunchOptions,
    PartialOptions,
    Role,
    RunExecutable,
)

logger = logging.getLogger(__name__)

OptionsParser = Callable[[Sequence[str] | None], tuple[PartialOptions, argparse.Namespace]]


def configWithSettings_load(args: argparse.Namespace) -> Config:
    """
    Load launcher config and initialize settings.

    Args:
        args: Parsed CLI args.

    Returns:
        Loaded config (built-in defaults when no file exists).

    Raises:
        FileNotFoundError: Explicit `--config` path missing.
        ValueError, yaml.YAMLError: Malformed config file.
    """
    config_path: Path | None = Path(args.config) if args.config else None
    config: Config = ConfigLoader.config_load(config_path)
    settings.initialize(config)
    return config


def roleLogLevel_get(role: Role, config: Config) -> str:
    """Default RUST_LOG token for a role"""
    return config.server.log_level if role is Role.SERVER else config.client.log_level


def launchOptions_build(partial: PartialOptions) -> LaunchOptions:
    """
    Merge config defaults and resolve credentials.

    Args:
        partial: Parser output.

    Returns:
        Final launch options.
    """
    config: Config = settings.config
    defaults = config.launchDefaults_get(roleLogLevel_get(partial.role, config))
    return launchOptions_resolve(options_merge(partial, defaults))


def projectDir_resolve(launcher_path: str | None) -> Path:
    """
    Directory searched for the executable.

    `launch.project_dir` from the loaded config wins over the launcher location.

    Args:
        launcher_path: Path of the running launcher (default: sys.argv[0]).

    Returns:
        Absolute project directory.
    """
    project_dir: str | None = settings.config.launch.project_dir
    if project_dir:
        return Path(project_dir).expanduser().resolve()
    return Path(launcher_path or sys.argv[0]).resolve().parent


def dryRun_print(plan: EnvironmentPlan, action: LaunchAction) -> None:
    """
    Print the environment plan and launch action without dispatching.

    Args:
        plan: Materialized environment plan.
        action: Resolved launch action.
    """
    for name, value in plan.assignments.items():
        print(f"{name}={assignmentValue_display(name, value)}")
    for name in plan.removals:
        print(f"unset {name}")
    if isinstance(action, RunExecutable):
        print(f"exec {action.path}")
    else:
        print(f"exec {' '.join(action.argv)}")


def launcher_run(
    role: Role,
    options_parse: OptionsParser,
    argv: Sequence[str] | None = None,
    environ: Mapping[str, str] | None = None,
    launcher_path: str | None = None,
    dispatch: Callable[[LaunchAction, Mapping[str, str]], None] = launchAction_dispatch,
) -> int:
    """
    Run the full launcher pipeline for one role.

    On success the process is replaced and this function does not return.

    Args:
        role: Launcher role (used for diagnostics).
        options_parse: Role-specific argument parser.
        argv: Arguments without program name (default: sys.argv[1:]).
        environ: Inherited environment (default: os.environ).
        launcher_path: Launcher location for executable search.
        dispatch: Process-replacement function.

    Returns:
        Exit code when the pipeline stops before or at dispatch.
    """
    try:
        partial, args = options_parse(argv)
    except UsageError as e:
        print(f"Error: {e}", file=sys.stderr)
        if e.usage:
            print(e.usage, file=sys.stderr)
        return e.exit_code

    try:
        credentialSource_require(bool(partial.secure_mode), partial.key, partial.key_file)
    except LaunchError as e:
        print(f"Error: {e}", file=sys.stderr)
        return e.exit_code

    try:
        configWithSettings_load(args)
    except OSError as e:
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_USAGE
    except (ValueError, yaml.YAMLError) as e:
        print(f"Error loading config: {e}", file=sys.stderr)
        return EXIT_USAGE

    config: Config = settings.config
    try:
        logging_setup(config.logging.level, config.logging.format, config.logging.file)
    except OSError as e:
        print(f"Error: cannot open log file {config.logging.file}: {e}", file=sys.stderr)
        return EXIT_USAGE

    try:
        options: LaunchOptions = launchOptions_build(partial)
        if args.verify_key and options.key_material is not None:
            keyMaterial_verify(options.key_material)
            logger.info("Key material verified")
    except LaunchError as e:
        print(f"Error: {e}", file=sys.stderr)
        return e.exit_code

    inherited: Mapping[str, str] = os.environ if environ is None else environ
    plan: EnvironmentPlan = environment_materialize(
        options,
        inherited,
        wgpu_backend=config.server.wgpu_backend,
        wgpu_allow_software=config.server.wgpu_allow_software,
    )
    logger.info(f"[{role.value}] {environmentSummary_format(plan)}")

    action: LaunchAction = launchTarget_resolve(
        role,
        projectDir_resolve(launcher_path),
        client_binary=config.launch.client_binary,
        server_binary=config.launch.server_binary,
    )

    if args.dry_run:
        dryRun_print(plan, action)
        return EXIT_OK

    try:
        dispatch(action, plan.apply(dict(inherited)))
    except OSError as e:
        print(f"Error: failed to launch {action}: {e}", file=sys.stderr)
        return EXIT_USAGE
    return EXIT_OK
