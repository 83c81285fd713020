# Copyright (c) Meta Platforms, Inc. and affiliates.
# All rights reserved.
"""Helper functionality for click commands"""
import logging
from functools import wraps
from pathlib import Path
from typing import Any, Callable, Dict, get_args, TypeVar, Union

import click
import tomli
from envreport.types import LOG_LEVEL
from typeguard import typechecked
from typing_extensions import ParamSpec

logger = logging.getLogger(__name__)

P = ParamSpec("P")
R = TypeVar("R")

DEFAULT_CONFIG_PATH = "/etc/envreport/config.toml"

_ClickCallback = Callable[[click.Context, click.Parameter, Path], None]


@typechecked
def ensure_dict(x: Any) -> Dict[str, Any]:
    return x


def _set_default_map(name: str) -> _ClickCallback:
    @typechecked
    def cb(ctx: click.Context, param: click.Parameter, path: Path) -> None:
        if not path.exists() or path == Path("/dev/null"):
            return

        logger.info(f"Reading config from {path}...")
        with path.open("rb") as f:
            try:
                conf = tomli.load(f)
            except tomli.TOMLDecodeError as e:
                raise click.BadParameter(
                    f"{path} does not contain valid TOML.",
                    ctx=ctx,
                    param=param,
                ) from e
        try:
            default_map = ensure_dict(conf[name])
        except KeyError as e:
            raise click.BadParameter(
                f"'{name}' is not a top-level table name in {path}. Valid names: {list(conf.keys())}",
                ctx=ctx,
                param=param,
            ) from e
        logger.info(f"Loaded table '{name}'.")

        ctx.default_map = {**(ctx.default_map or {}), **default_map}

    return cb


def toml_config_option(
    name: str,
    *,
    default_config_path: Union[str, Path] = DEFAULT_CONFIG_PATH,
) -> Callable[[Callable[P, R]], Callable[P, R]]:
    """Adds a `--config` option which loads option defaults from table `name` of a
    TOML file. A non-existent path or `/dev/null` is treated as an empty table.

    Precedence (lowest to highest):
    * `default` argument to `click.option`
    * the value in the config file
    * value passed at the command line

    The option is eager so the defaults are in place before the other options
    are resolved.
    """

    def decorator(f: Callable[P, R]) -> Callable[P, R]:
        return click.option(
            "--config",
            type=click.Path(dir_okay=False, path_type=Path),
            callback=_set_default_map(name),
            default=default_config_path,
            show_default=True,
            expose_value=False,
            is_eager=True,
            help=(
                f"Load option values from table '{name}' in the given TOML config file. "
                "A non-existent path or '/dev/null' are ignored and treated as empty tables."
            ),
        )(f)

    return decorator


def logging_arguments(f: Callable[P, R]) -> Callable[P, R]:
    @click.option(
        "--log-level",
        type=click.Choice(get_args(LOG_LEVEL)),
        default="INFO",
        show_default=True,
        help="Logging verbosity level.",
    )
    @click.option(
        "--log-folder",
        type=click.Path(file_okay=False),
        default=None,
        help="The folder where logs will be stored. Logs go to stdout if omitted.",
    )
    @wraps(f)
    def wrapper(*args: P.args, **kwargs: P.kwargs) -> R:
        return f(*args, **kwargs)

    return wrapper


def timeout_argument(f: Callable[P, R]) -> Callable[P, R]:
    @click.option(
        "--timeout",
        type=click.IntRange(min=1),
        default=30,
        show_default=True,
        help="Seconds until the filesystem type query times out",
    )
    @wraps(f)
    def wrapper(*args: P.args, **kwargs: P.kwargs) -> R:
        return f(*args, **kwargs)

    return wrapper
