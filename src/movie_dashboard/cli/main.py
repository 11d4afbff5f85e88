"""Main CLI entry point."""

import asyncio
import sys
from pathlib import Path
from typing import List, Optional, Tuple

import click

from .. import __version__
from ..config import ConfigManager
from ..core.interfaces import IDashboardService, IMovieCatalog, ITraceLogger
from ..core.models import DashboardFilters, DashboardReport, Genre, MovieDetails, SortOption
from ..core.transformations import get_month_name
from ..infrastructure import Container, setup_logging
from ..utils import ConfigurationError, MovieDashboardError


@click.group()
@click.option(
    "--config",
    "-c",
    type=click.Path(exists=True, path_type=Path),
    help="Path to configuration file",
)
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose logging")
@click.option("--mock", is_flag=True, help="Use bundled sample data instead of TMDb")
@click.version_option(version=__version__, prog_name="movie-dashboard")
@click.pass_context
def cli(ctx: click.Context, config: Optional[Path], verbose: bool, mock: bool) -> None:
    """Movie Trends Dashboard - Turn TMDb movie data into trend dashboards."""
    # Initialize context object
    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose
    ctx.obj["config_path"] = config

    # Skip configuration loading for commands that don't need it
    if ctx.invoked_subcommand == "init":
        return

    try:
        # Load configuration
        config_manager = ConfigManager(config)
        app_config = config_manager.load_config()

        if mock:
            app_config.app.use_mock_data = True

        # Set up logging
        if verbose:
            app_config.logging.level = "DEBUG"
        setup_logging(app_config.logging)

        # Create container
        container = Container(config_manager)
        container.configure_default_services()

        ctx.obj["config"] = app_config
        ctx.obj["container"] = container

    except (ConfigurationError, FileNotFoundError, ValueError) as e:
        click.echo(f"Configuration error: {e}", err=True)
        sys.exit(1)
    except Exception as e:
        click.echo(f"Initialization error: {e}", err=True)
        sys.exit(1)


@cli.command()
@click.option(
    "--output",
    "-o",
    type=click.Path(path_type=Path),
    default=Path.cwd() / "config" / "config.yaml",
    help="Output path for configuration file",
)
def init(output: Path) -> None:
    """Initialize configuration file."""
    try:
        if output.exists():
            if not click.confirm(f"Configuration file {output} already exists. Overwrite?"):
                return

        # Create directory if needed
        output.parent.mkdir(parents=True, exist_ok=True)

        # Create default config
        ConfigManager.create_default_config(output)
        click.echo(f"Configuration file created at: {output}")
        click.echo("Please set TMDB_API_KEY (or edit the file) before fetching live data.")

    except Exception as e:
        click.echo(f"Failed to create configuration: {e}", err=True)
        sys.exit(1)


@cli.command()
@click.pass_context
def validate(ctx: click.Context) -> None:
    """Validate configuration and prerequisites."""
    container = ctx.obj["container"]

    try:
        service = container.get(IDashboardService)
        errors = service.validate_prerequisites()
        if errors:
            for error in errors:
                click.echo(f"✗ {error}")
            raise MovieDashboardError("Validation failed")
        click.echo("All prerequisites validated successfully")
    except MovieDashboardError as e:
        click.echo(f"Validation failed: {e}", err=True)
        sys.exit(1)


@cli.command()
@click.pass_context
def status(ctx: click.Context) -> None:
    """Show system status and configuration."""
    config = ctx.obj["config"]

    click.echo("Movie Trends Dashboard Status")
    click.echo("=" * 40)

    click.echo(f"Catalog: {'Mock data' if config.app.use_mock_data else 'TMDb'}")
    click.echo(f"TMDb Configured: {'✓' if config.tmdb.has_api_key else '✗'}")
    click.echo(f"TMDb Base URL: {config.tmdb.base_url}")
    click.echo(f"Max Pages: {config.tmdb.max_pages}")
    click.echo(
        f"Cache: {'✓' if config.cache.enabled else '✗'} "
        f"(genres {config.cache.genres_ttl_seconds}s, movies {config.cache.movies_ttl_seconds}s, "
        f"details {config.cache.details_ttl_seconds}s)"
    )
    click.echo(
        f"Traces: {'✓' if config.traces.enabled else '✗'} "
        f"({Path(config.traces.directory) / config.traces.file_name})"
    )
    click.echo(f"Webhook: {'✓' if config.traces.webhook.enabled else '✗'}")
    click.echo(
        f"Pipeline: window {config.pipeline.rolling_window}, top {config.pipeline.top_n} "
        f"by {config.pipeline.ranking_criterion.value}"
    )
    click.echo(f"Environment: {config.app.environment}")


@cli.command()
@click.pass_context
def genres(ctx: click.Context) -> None:
    """List movie genres."""
    container = ctx.obj["container"]

    try:
        genre_list = asyncio.run(_fetch_genres(container))
    except MovieDashboardError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)

    click.echo(f"{'ID':>6}  Name")
    for genre in genre_list:
        click.echo(f"{genre.id:>6}  {genre.name}")
    click.echo(f"\n{len(genre_list)} genres")


@cli.command()
@click.argument("movie_id", type=int)
@click.pass_context
def movie(ctx: click.Context, movie_id: int) -> None:
    """Show details of one movie."""
    container = ctx.obj["container"]

    try:
        details = asyncio.run(_fetch_movie_details(container, movie_id))
    except MovieDashboardError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)

    if details is None:
        click.echo(f"Movie {movie_id} not found", err=True)
        sys.exit(1)

    click.echo(details.title)
    click.echo("=" * len(details.title))
    if details.tagline:
        click.echo(details.tagline)
    click.echo(f"Release date: {details.release_date or 'Unknown'}")
    click.echo(f"Genres: {', '.join(details.genre_names) or '-'}")
    if details.runtime:
        click.echo(f"Runtime: {details.runtime} min")
    click.echo(f"Popularity: {details.popularity:.2f}")
    click.echo(f"Rating: {details.vote_average:.1f} ({details.vote_count} votes)")
    if details.overview:
        click.echo(f"\n{details.overview}")


@cli.command()
@click.option("--start-date", help="Start date (YYYY-MM-DD)")
@click.option("--end-date", help="End date (YYYY-MM-DD)")
@click.option("--last-months", type=int, help="Use the last N months as date range")
@click.option("--genre", "genre_ids", type=int, multiple=True, help="Genre ID (repeatable)")
@click.option(
    "--sort-by",
    type=click.Choice([option.value for option in SortOption]),
    help="Discover sort order",
)
@click.option("--min-vote-count", type=int, help="Minimum vote count")
@click.option("--pages", type=int, help="Maximum discover pages to fetch")
@click.option("--json", "as_json", is_flag=True, help="Print the report as JSON")
@click.option(
    "--output", "-o", type=click.Path(path_type=Path), help="Write the JSON report to a file"
)
@click.pass_context
def dashboard(
    ctx: click.Context,
    start_date: Optional[str],
    end_date: Optional[str],
    last_months: Optional[int],
    genre_ids: Tuple[int, ...],
    sort_by: Optional[str],
    min_vote_count: Optional[int],
    pages: Optional[int],
    as_json: bool,
    output: Optional[Path],
) -> None:
    """Build the movie trends dashboard."""
    container = ctx.obj["container"]

    try:
        report = asyncio.run(
            _build_dashboard(
                container,
                start_date=start_date,
                end_date=end_date,
                last_months=last_months,
                genre_ids=list(genre_ids),
                sort_by=sort_by,
                min_vote_count=min_vote_count,
                pages=pages,
            )
        )
    except KeyboardInterrupt:
        click.echo("\nOperation cancelled by user.")
        sys.exit(1)
    except (MovieDashboardError, ValueError) as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)

    if output:
        output.parent.mkdir(parents=True, exist_ok=True)
        output.write_text(report.model_dump_json(indent=2), encoding="utf-8")
        click.echo(f"Report written to: {output}")

    if as_json:
        click.echo(report.model_dump_json(indent=2))
    elif not output:
        _print_report(report)


@cli.command()
@click.option("--limit", "-n", type=int, default=20, show_default=True, help="Traces to show")
@click.option("--clean", is_flag=True, help="Remove traces older than the retention period")
@click.pass_context
def traces(ctx: click.Context, limit: int, clean: bool) -> None:
    """Show recent HTTP traces."""
    container = ctx.obj["container"]
    trace_logger = container.get(ITraceLogger)

    if clean:
        removed = asyncio.run(trace_logger.clean_old_logs())
        click.echo(f"Removed {removed} old trace entries")
        return

    recent = asyncio.run(trace_logger.get_recent_traces(limit))
    if not recent:
        click.echo("No traces recorded")
        return

    for trace in recent:
        line = (
            f"{trace.timestamp}  {trace.method:<6} {trace.status:>3}  "
            f"{trace.duration:>6}ms  {trace.url}"
        )
        if trace.error:
            line += f"  [{trace.error}]"
        click.echo(line)


async def _fetch_genres(container: Container) -> List[Genre]:
    """Fetch genres and release the catalog."""
    try:
        catalog = container.get(IMovieCatalog)
        return await catalog.get_genres()
    finally:
        await container.close()


async def _fetch_movie_details(container: Container, movie_id: int) -> Optional[MovieDetails]:
    """Fetch movie details and release the catalog."""
    try:
        catalog = container.get(IMovieCatalog)
        return await catalog.get_movie_details(movie_id)
    finally:
        await container.close()


async def _build_dashboard(
    container: Container,
    start_date: Optional[str],
    end_date: Optional[str],
    last_months: Optional[int],
    genre_ids: List[int],
    sort_by: Optional[str],
    min_vote_count: Optional[int],
    pages: Optional[int],
) -> DashboardReport:
    """Build filters from options and run the dashboard."""
    try:
        service = container.get(IDashboardService)

        if last_months is not None:
            filters = service.last_months_filters(last_months)
        else:
            filters = service.default_filters().model_copy(
                update={"start_date": start_date or "", "end_date": end_date or ""}
            )

        overrides = {}
        if genre_ids:
            overrides["genres"] = genre_ids
        if sort_by:
            overrides["sort_by"] = SortOption(sort_by)
        if min_vote_count is not None:
            overrides["min_vote_count"] = min_vote_count
        filters = DashboardFilters.model_validate({**filters.model_dump(), **overrides})

        errors = service.validate_prerequisites(filters)
        if errors:
            for error in errors:
                click.echo(f"✗ {error}", err=True)
            raise MovieDashboardError("Prerequisites not met")

        return await service.build_dashboard(filters, pages)

    finally:
        await container.close()


def _print_report(report: DashboardReport) -> None:
    """Print a dashboard report as text tables."""
    data = report.data

    click.echo("Movie Trends Dashboard")
    click.echo("=" * 40)
    click.echo(f"Movies analyzed: {data.total_movies}")
    click.echo(f"Date range: {data.date_range.start} to {data.date_range.end}")

    moving_avg_header = f"Avg({data.window_size})"
    click.echo("\nMonthly trends")
    click.echo(
        f"{'Month':<16} {'Movies':>6} {'Popularity':>11} {'Change':>8} {moving_avg_header:>9} "
        f"{'Rating':>6} {'Change':>8}"
    )
    for record in data.monthly_data:
        click.echo(
            f"{get_month_name(record.month):<16} {record.movies_count:>6} "
            f"{record.avg_popularity:>11.2f} {_format_percent(record.popularity_change_percent):>8} "
            f"{_format_number(record.popularity_moving_avg):>9} "
            f"{record.avg_vote_average:>6.2f} {_format_percent(record.vote_change_percent):>8}"
        )

    click.echo(f"\nTop movies by {data.ranking_criterion.value}")
    for position, top_movie in enumerate(data.top_movies, start=1):
        click.echo(
            f"{position:>2}. {top_movie.title} ({top_movie.release_date[:4]}) "
            f"popularity {top_movie.popularity:.2f}, rating {top_movie.vote_average:.1f} "
            f"[{', '.join(top_movie.genre_names)}]"
        )

    click.echo("\nGenre distribution")
    for entry in data.genre_distribution:
        click.echo(
            f"{entry.genre_name:<18} {entry.count:>4} {entry.percentage:>7.2f}%  "
            f"popularity {entry.avg_popularity:.2f}, rating {entry.avg_vote_average:.2f}"
        )

    trends = report.trends
    click.echo("\nTrends")
    click.echo(f"Popularity: {trends.popularity_trend.value}")
    click.echo(f"Rating: {trends.vote_trend.value}")
    click.echo(f"Strength: {trends.trend_strength:.2f}")

    validation = report.validation
    for error in validation.errors:
        click.echo(f"✗ {error}")
    for warning in validation.warnings:
        click.echo(f"! {warning}")


def _format_percent(value: Optional[float]) -> str:
    return "-" if value is None else f"{value:+.2f}%"


def _format_number(value: Optional[float]) -> str:
    return "-" if value is None else f"{value:.2f}"


def main() -> None:
    """Main entry point."""
    cli()


if __name__ == "__main__":
    main()
