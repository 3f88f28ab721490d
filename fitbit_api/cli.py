import json

import click

from fitbit_api.auth import TokenRefresher
from fitbit_api.clients.fitbit import FitbitClient
from fitbit_api.config import Config
from fitbit_api.dates import InvalidDateError
from fitbit_api.logger import get_logger
from fitbit_api.responses import UnhandledResponseError


def _echo_result(result):
    """Print a successful payload as JSON, abort on a failure."""
    if not result.is_success:
        detail = json.dumps(result.error) if result.error else "no error details"
        click.echo(f"Error: HTTP {result.code}: {detail}", err=True)
        raise click.Abort()

    click.echo(json.dumps(result.data, indent=2))


def _run(call):
    """Run an API call, turning argument and transport errors into an abort."""
    try:
        return call()
    except InvalidDateError as e:
        click.echo(f"Error: {e}. Use YYYY-MM-DD, today or yesterday", err=True)
        raise click.Abort()
    except (ValueError, UnhandledResponseError) as e:
        click.echo(f"Error: {e}", err=True)
        raise click.Abort()


@click.group()
@click.option('--token', envvar='FITBIT_ACCESS_TOKEN', help='OAuth2 access token')
@click.option('--user-id', default=None, help='Fitbit user id (default: token owner)')
@click.pass_context
def cli(ctx, token, user_id):
    """Query the Fitbit Web API."""
    get_logger('fitbit_api')
    ctx.ensure_object(dict)
    ctx.obj['token'] = token or Config.ACCESS_TOKEN
    ctx.obj['user_id'] = user_id or Config.USER_ID


def _client(obj):
    """Build the API client from the group options."""
    if not obj['token']:
        click.echo("Error: no access token, set FITBIT_ACCESS_TOKEN or pass --token", err=True)
        raise click.Abort()

    return FitbitClient(
        obj['token'],
        user_id=obj['user_id'],
        get_token=TokenRefresher.from_config(),
    )


@cli.command()
@click.pass_obj
def profile(obj):
    """Show the user's profile."""
    _echo_result(_run(_client(obj).user.get_profile))


@cli.command()
@click.pass_obj
def devices(obj):
    """List paired devices."""
    _echo_result(_run(_client(obj).devices.get_list))


@cli.command()
@click.argument('date', default='today')
@click.pass_obj
def sleep(obj, date):
    """Show sleep logs for DATE (YYYY-MM-DD, today, yesterday)."""
    client = _client(obj)
    _echo_result(_run(lambda: client.sleep.get_by_date(date)))


@cli.command('sleep-log')
@click.option('--after', 'after_date', help='List logs after this date')
@click.option('--before', 'before_date', help='List logs before this date')
@click.option('--limit', default=Config.MAX_PAGE_LIMIT, help='Entries per page (1-100)')
@click.option('--max-pages', default=0, help='Stop after this many pages (0: all)')
@click.pass_obj
def sleep_log(obj, after_date, before_date, limit, max_pages):
    """List sleep logs, following pagination."""
    client = _client(obj)

    def walk():
        pages = client.sleep.get_log_list(
            before_date=before_date,
            after_date=after_date,
            limit=limit,
        )
        for state in pages:
            click.echo(f"Fetched {len(state.all_data)} logs in {state.total_calls} calls", err=True)
            if max_pages and state.total_calls >= max_pages:
                return state
        return pages.result

    state = _run(walk)

    if not state.last_response.is_success:
        _echo_result(state.last_response)
    click.echo(json.dumps(state.all_data, indent=2))


@cli.command()
@click.argument('date', default='today')
@click.option('--period', default='1d', type=click.Choice(['1d', '7d', '30d', '1w', '1m']))
@click.pass_obj
def heart(obj, date, period):
    """Show the heart rate summary for DATE."""
    client = _client(obj)
    _echo_result(_run(lambda: client.heart_rate.get_time_series(date=date, period=period)))


def main():
    """Entry point for the CLI."""
    cli()


if __name__ == '__main__':
    main()
