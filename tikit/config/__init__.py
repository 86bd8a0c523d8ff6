"""Configuration utilities for tikit."""

import pathlib

import click
import yaml
from rich.prompt import Prompt

from tikit import utils

from . import defaults

GENERAL_KEYS = [
    "jira_server",
    "jql",
    "max_results",
    "timeout",
    "insecure",
]


def make_config(config: dict, config_file: pathlib.Path) -> dict:
    config = read_config(config, pathlib.Path(config_file))

    if not config["jira_server"]:
        server_url = Prompt.ask(
            "Enter Jira server URL (or workspace id for atlassian cloud)"
        )
        config["jira_server"] = normalize_server_url(server_url)
        write_config(config, pathlib.Path(config_file))
        utils.log(f"Configuration saved to {config_file}")

    if not config.get("jira_email"):
        raise click.ClickException("JIRA_EMAIL environment variable not set.")
    if not config.get("jira_api_token"):
        raise click.ClickException("JIRA_API_TOKEN environment variable not set.")

    return config


def normalize_server_url(server_url: str) -> str:
    """Turn a bare atlassian workspace id or host into a full https URL."""
    server_url = server_url.strip().rstrip("/")
    if not server_url.startswith(("https://", "http://")):
        if len(server_url.split(".")) == 1:
            server_url = f"{server_url}.atlassian.net"
        server_url = "https://" + server_url
    return server_url


def read_config(ret: dict, config_file: pathlib.Path) -> dict:
    """Read configuration from yaml file, command line values win"""

    def checks():
        if ret.get("jira_server"):
            ret["jira_server"] = normalize_server_url(ret["jira_server"])
        else:
            ret["jira_server"] = None

        if not ret.get("jql"):
            ret["jql"] = defaults.JQL

        if not ret.get("max_results"):
            ret["max_results"] = defaults.MAX_RESULTS
        ret["max_results"] = int(ret["max_results"])

        if not ret.get("timeout"):
            ret["timeout"] = defaults.REQUEST_TIMEOUT
        ret["timeout"] = float(ret["timeout"])

        if "insecure" not in ret or ret["insecure"] is None:
            ret["insecure"] = False

        if not ret.get("filters"):
            ret["filters"] = {}

    if config_file.exists():
        with config_file.open() as file:
            config = yaml.safe_load(file) or {}
        general = config.get("general") or {}
        for x in GENERAL_KEYS:
            if ret.get(x) in (None, "") and general.get(x) not in (None, ""):
                ret[x] = general[x]
        if general.get("filters") and not ret.get("filters"):
            ret["filters"] = {
                str(k): str(v) for k, v in general["filters"].items() if v
            }

    checks()
    return ret


def write_config(config, config_file: pathlib.Path):
    """Write configuration to yaml file"""
    config_file.parent.mkdir(parents=True, exist_ok=True)

    existing: dict = {}
    if config_file.exists():
        with config_file.open() as file:
            existing = yaml.safe_load(file) or {}

    general = existing.get("general") or {}
    for key in GENERAL_KEYS:
        if config.get(key):
            general[key] = config[key]
    if config.get("filters"):
        general["filters"] = config["filters"]
    existing["general"] = general

    with config_file.open("w") as file:
        yaml.safe_dump(existing, file)


def parse_filters(values) -> dict:
    """Parse repeated ``key=value`` filter options into a filter set."""
    filters: dict = {}
    for value in values or []:
        if "=" not in value:
            raise click.BadParameter(
                f"Invalid filter '{value}', expected key=value", param_hint="--filter"
            )
        key, _, val = value.partition("=")
        key = key.strip()
        if key not in defaults.FILTER_KEYS:
            raise click.BadParameter(
                f"Unknown filter '{key}', choose from {', '.join(defaults.FILTER_KEYS)}",
                param_hint="--filter",
            )
        filters[key] = val.strip().strip("\"'")
    return filters
