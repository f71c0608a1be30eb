"""Submit command implementation"""

import asyncio
import sys
from pathlib import Path

import click

from ..utils.output import console, format_json, format_notarize_result
from ...api.exceptions import ConfigError
from ...constants import (
    EMOJI_ROCKET,
    INPUT_API_ISSUER,
    INPUT_API_KEY,
    INPUT_API_KEY_ID,
    INPUT_PASSWORD,
    INPUT_PRIMARY_BUNDLE_ID,
    INPUT_PRODUCT_PATH,
    INPUT_USERNAME,
    INPUT_VERBOSE,
    INPUT_WAIT_TIMEOUT,
    MSG_UNEXPECTED_ERROR,
)
from ...core import Reporter
from ...services import ConfigService, NotarizeService


@click.command()
@click.argument('product_path', required=False)
@click.option(
    '--api-key',
    help='App Store Connect API key contents'
)
@click.option(
    '--api-key-file',
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help='File containing the App Store Connect API key (.p8)'
)
@click.option(
    '--api-key-id',
    help='App Store Connect API key identifier'
)
@click.option(
    '--api-issuer',
    help='App Store Connect API issuer identifier'
)
@click.option(
    '--username',
    help='App Store Connect username (accepted, not used)'
)
@click.option(
    '--password',
    help='App Store Connect password (accepted, not used)'
)
@click.option(
    '--primary-bundle-id',
    help='Primary bundle identifier (accepted, not used)'
)
@click.option(
    '--verbose/--no-verbose',
    default=None,
    help='Pass --verbose to notarytool and stream its output'
)
@click.option(
    '--wait-timeout',
    type=click.FloatRange(min=0, min_open=True),
    help='Seconds to wait for notarytool before killing it'
)
@click.option(
    '--config', 'config_path',
    type=click.Path(path_type=Path),
    help='YAML configuration file (default: .notarize-tool.yaml)'
)
@click.option(
    '--json', 'as_json',
    is_flag=True,
    help='Print the result as JSON'
)
@click.pass_context
def submit(ctx, product_path, api_key, api_key_file, api_key_id, api_issuer,
           username, password, primary_bundle_id, verbose, wait_timeout,
           config_path, as_json):
    """Archive a product and submit it for notarization

    Values not given on the command line are read from INPUT_* environment
    variables (e.g. INPUT_PRODUCT-PATH) and then from the configuration file.

    Examples:
        notarize-tool submit build/MyApp.app --api-key-file AuthKey.p8 \\
            --api-key-id ABC123 --api-issuer 69a6de7e-...
        notarize-tool submit --config ci/notarize.yaml --verbose
    """
    reporter = Reporter()

    if api_key_file:
        api_key = api_key_file.read_bytes()

    overrides = {
        INPUT_PRODUCT_PATH: product_path,
        INPUT_API_KEY: api_key,
        INPUT_API_KEY_ID: api_key_id,
        INPUT_API_ISSUER: api_issuer,
        INPUT_USERNAME: username,
        INPUT_PASSWORD: password,
        INPUT_PRIMARY_BUNDLE_ID: primary_bundle_id,
        INPUT_VERBOSE: verbose,
        INPUT_WAIT_TIMEOUT: wait_timeout,
    }

    try:
        inputs = ConfigService(config_path).collect(overrides)
    except ConfigError as e:
        reporter.set_failed(MSG_UNEXPECTED_ERROR.format(message=e.message))
        sys.exit(1)

    if not as_json:
        console.print(f"\n{EMOJI_ROCKET} Notarizing {inputs.get(INPUT_PRODUCT_PATH, '')}...")

    service = NotarizeService(reporter)
    result = asyncio.run(service.run(inputs))

    if as_json:
        format_json(result.to_dict())
    else:
        format_notarize_result(result)

    if not result.is_success:
        sys.exit(1)
