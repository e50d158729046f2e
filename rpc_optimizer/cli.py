"""Command line interface for the RPC Optimizer."""
import argparse
import asyncio
import sys
from typing import Any, Callable, Dict, List, Optional

from rich.console import Console
from rich.table import Table

from rpc_optimizer.benchmark.latency_analyzer import round_half_up
from rpc_optimizer.benchmark.models import BenchmarkResult
from rpc_optimizer.benchmark.recommender import Recommender
from rpc_optimizer.benchmark.result_exporter import ResultExporter
from rpc_optimizer.chains.networks import Network
from rpc_optimizer.const import APP_VERSION, CLI_DESCRIPTION, CLI_PROG
from rpc_optimizer.exceptions import EndpointSourceError, UnknownNetworkError
from rpc_optimizer.optimizer import RpcOptimizer
from rpc_optimizer.shared.config import Config
from rpc_optimizer.shared.logging import LoggingManager
from rpc_optimizer.wallet.integration import (
    generate_network_config, generate_rainbow_link, generate_trust_wallet_link
)


console = Console()
logger = LoggingManager.get_logger(__name__)

LIVE_BENCHMARK_SAMPLES = 3
LIVE_BENCHMARK_ROWS = 15


def _score_style(score: int) -> str:
    if score >= 80:
        return "green"
    if score >= 60:
        return "yellow"
    return "red"


def _percent(rate: float) -> str:
    return f"{int(round_half_up(rate * 100))}%"


def _sorted_by_score(results: List[BenchmarkResult]) -> List[BenchmarkResult]:
    return sorted(results, key=lambda r: r.score, reverse=True)


def _create_optimizer() -> RpcOptimizer:
    return RpcOptimizer(Config())


async def cmd_networks(args: argparse.Namespace) -> int:
    """List supported networks."""
    optimizer = _create_optimizer()
    try:
        networks = optimizer.get_supported_networks()
        if args.json:
            console.print_json(data=[
                {
                    "id": n.value,
                    "name": n.metadata.name,
                    "chain_id": n.metadata.chain_id,
                    "endpoints": len(optimizer.get_endpoints(n)),
                }
                for n in networks
            ])
            return 0

        table = Table(title="Supported Networks", show_header=True, header_style="bold cyan")
        table.add_column("Network")
        table.add_column("Name")
        table.add_column("Symbol")
        table.add_column("Chain ID", justify="right")
        table.add_column("Endpoints", justify="right")
        for network in networks:
            metadata = network.metadata
            table.add_row(
                network.value,
                metadata.name,
                metadata.symbol,
                str(metadata.chain_id) if metadata.chain_id is not None else "-",
                str(len(optimizer.get_endpoints(network))),
            )
        console.print(table)
        return 0
    finally:
        await optimizer.aclose()


async def cmd_check(args: argparse.Namespace) -> int:
    """Quick single-probe health check."""
    network = Network.parse(args.network)
    optimizer = _create_optimizer()
    try:
        with console.status(f"Checking {network} RPC endpoints..."):
            results = await optimizer.check_network(network, args.timeout)
    finally:
        await optimizer.aclose()

    results = sorted(results, key=lambda r: r.latency_ms)
    if args.json:
        console.print_json(data=[r.to_dict() for r in results])
        return 0

    table = Table(title=f"{network.value.upper()} RPC Health Check", header_style="bold cyan")
    table.add_column("Provider", width=20)
    table.add_column("Status", width=10)
    table.add_column("Latency", justify="right")
    table.add_column("Block Height", justify="right")
    for result in results:
        table.add_row(
            result.endpoint.name,
            "[green]OK[/green]" if result.is_healthy else "[red]Fail[/red]",
            f"{round(result.latency_ms)}ms" if result.is_healthy else "-",
            f"{result.block_height:,}" if result.block_height is not None else "-",
        )
    console.print(table)
    return 0


async def cmd_benchmark(args: argparse.Namespace) -> int:
    """Full benchmark of one network."""
    network = Network.parse(args.network)
    optimizer = _create_optimizer()
    options = optimizer.default_options(
        samples=args.samples, timeout_ms=args.timeout, parallel=False if args.sequential else None
    )
    try:
        with console.status(f"Benchmarking {network} RPC endpoints..."):
            results = await optimizer.benchmark_network(network, options)
    finally:
        await optimizer.aclose()

    results = _sorted_by_score(results)
    if args.csv:
        ResultExporter.save_results(results, args.csv)

    if args.json:
        console.print_json(data=[r.to_dict() for r in results])
        return 0

    table = Table(title=f"{network.value.upper()} RPC Benchmark Results", header_style="bold cyan")
    table.add_column("Provider", width=18)
    table.add_column("Score", justify="right")
    table.add_column("Avg", justify="right")
    table.add_column("P95", justify="right")
    table.add_column("Success", justify="right")
    table.add_column("Block Delay", justify="right")
    for result in results:
        style = _score_style(result.score)
        table.add_row(
            result.endpoint.name,
            f"[{style}]{result.score}/100[/{style}]",
            f"{round(result.avg_latency_ms)}ms",
            f"{round(result.p95_latency_ms)}ms",
            _percent(result.success_rate),
            "[green]0[/green]" if result.block_delay == 0 else f"[yellow]{result.block_delay}[/yellow]",
        )
    console.print(table)
    return 0


async def cmd_best(args: argparse.Namespace) -> int:
    """Print the recommended endpoint for a network."""
    network = Network.parse(args.network)
    optimizer = _create_optimizer()
    options = optimizer.default_options(samples=args.samples, timeout_ms=args.timeout)
    try:
        with console.status(f"Finding best RPC for {network}..."):
            recommendation = await optimizer.get_best_rpc(network, options)
    finally:
        await optimizer.aclose()

    if recommendation is None:
        console.print("[red]No healthy RPC endpoints found.[/red]")
        return 1

    best = recommendation.recommended
    wallet: Optional[Dict[str, Any]] = None
    if args.wallet_config:
        wallet = {
            "config": generate_network_config(best.endpoint),
            "trust_wallet": generate_trust_wallet_link(best.endpoint),
            "rainbow": generate_rainbow_link(best.endpoint),
        }

    if args.json:
        data = Recommender.format_recommendation(recommendation)
        if wallet is not None:
            data["wallet"] = wallet
        console.print_json(data=data)
        return 0

    console.print(f"\n[bold]Best RPC for {network.value.upper()}:[/bold]\n")
    console.print(f"  [green]URL: {best.endpoint.url}[/green]", soft_wrap=True)
    console.print(f"  Provider: {best.endpoint.name} ({best.endpoint.provider})")
    console.print(f"  Score: [green]{best.score}/100[/green]")
    console.print(f"  Latency: {best.avg_latency_ms}ms avg, {best.p95_latency_ms}ms p95")
    console.print(f"  Reliability: {_percent(best.success_rate)}")
    console.print(f"  Reason: {recommendation.reason}")
    for index, alternative in enumerate(recommendation.alternatives, start=1):
        console.print(f"  Alternative {index}: {alternative.endpoint.url} ({alternative.score}/100)", soft_wrap=True)
    if wallet is not None:
        console.print("\n[bold]Wallet configuration:[/bold]")
        console.print_json(data=wallet["config"])
        for label, link in (("Trust Wallet", wallet["trust_wallet"]), ("Rainbow", wallet["rainbow"])):
            if link:
                console.print(f"  {label}: {link}", soft_wrap=True)
    console.print()
    return 0


async def cmd_fetch(args: argparse.Namespace) -> int:
    """List endpoints ChainList publishes for a network."""
    network = Network.parse(args.network)
    optimizer = _create_optimizer()
    try:
        with console.status(f"Fetching RPCs for {network} from ChainList..."):
            endpoints = await optimizer.chainlist_fetcher.fetch_by_network(network)
    finally:
        await optimizer.aclose()

    if not endpoints:
        console.print(f"[yellow]No RPCs found for {network} (might not be on ChainList)[/yellow]")
        return 0

    if args.json:
        console.print_json(data=[e.to_dict() for e in endpoints])
        return 0

    console.print(f"\n[bold]Found {len(endpoints)} RPCs for {network.value.upper()} from ChainList:[/bold]\n")
    for index, endpoint in enumerate(endpoints, start=1):
        console.print(f"  [green]{index}. {endpoint.url}[/green]", soft_wrap=True)
        console.print(f"     [dim]Provider: {endpoint.provider}[/dim]")
    console.print()
    return 0


async def cmd_benchmark_live(args: argparse.Namespace) -> int:
    """Benchmark a network including endpoints freshly loaded from ChainList."""
    network = Network.parse(args.network)
    optimizer = _create_optimizer()
    optimizer.set_dynamic_fetch(True)
    options = optimizer.default_options(samples=args.samples)
    try:
        with console.status(f"Fetching and benchmarking {network} RPCs..."):
            await optimizer.refresh_endpoints(network)
            results = await optimizer.benchmark_network(network, options)
    finally:
        await optimizer.aclose()

    results = _sorted_by_score(results)
    if args.json:
        console.print_json(data=[r.to_dict() for r in results])
        return 0

    table = Table(title=f"{network.value.upper()} Live Benchmark ({len(results)} RPCs)", header_style="bold cyan")
    table.add_column("Provider", width=15)
    table.add_column("Score", justify="right")
    table.add_column("Avg", justify="right")
    table.add_column("Success", justify="right")
    table.add_column("URL", overflow="fold")
    for result in results[:LIVE_BENCHMARK_ROWS]:
        style = _score_style(result.score)
        table.add_row(
            result.endpoint.name,
            f"[{style}]{result.score}/100[/{style}]",
            f"{round(result.avg_latency_ms)}ms",
            _percent(result.success_rate),
            result.endpoint.url,
        )
    console.print(table)
    return 0


def _add_samples_option(parser: argparse.ArgumentParser, default: Optional[int] = None) -> None:
    parser.add_argument(
        "-s", "--samples",
        type=int,
        default=default,
        help="Number of samples per endpoint",
    )


def _add_timeout_option(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "-t", "--timeout",
        type=int,
        default=None,
        help="Timeout per request in milliseconds",
    )


def _add_json_option(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--json",
        action="store_true",
        help="Output as JSON",
    )


def build_parser() -> argparse.ArgumentParser:
    """Argument parser with one sub-command per operation."""
    parser = argparse.ArgumentParser(prog=CLI_PROG, description=CLI_DESCRIPTION)
    parser.add_argument("--version", action="version", version=f"%(prog)s {APP_VERSION}")
    parser.add_argument(
        "--log-level",
        default="WARNING",
        help="Logging level (DEBUG, INFO, WARNING, ERROR)",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    networks = subparsers.add_parser("networks", help="List all supported blockchain networks")
    _add_json_option(networks)
    networks.set_defaults(handler=cmd_networks)

    check = subparsers.add_parser("check", help="Quick health check for RPC endpoints")
    check.add_argument("network", help="Blockchain network (ethereum, polygon, bsc, ...)")
    _add_timeout_option(check)
    _add_json_option(check)
    check.set_defaults(handler=cmd_check)

    benchmark = subparsers.add_parser("benchmark", help="Run full benchmark on RPC endpoints")
    benchmark.add_argument("network", help="Blockchain network")
    _add_samples_option(benchmark)
    _add_timeout_option(benchmark)
    benchmark.add_argument(
        "--sequential",
        action="store_true",
        help="Benchmark endpoints one at a time",
    )
    _add_json_option(benchmark)
    benchmark.add_argument(
        "--csv",
        metavar="PATH",
        default=None,
        help="Also save results to a CSV file",
    )
    benchmark.set_defaults(handler=cmd_benchmark)

    best = subparsers.add_parser("best", help="Get the best RPC recommendation")
    best.add_argument("network", help="Blockchain network")
    _add_samples_option(best)
    _add_timeout_option(best)
    _add_json_option(best)
    best.add_argument(
        "--wallet-config",
        action="store_true",
        help="Include wallet network config and deep links",
    )
    best.set_defaults(handler=cmd_best)

    fetch = subparsers.add_parser("fetch", help="Fetch latest RPC endpoints from ChainList")
    fetch.add_argument("network", help="Blockchain network")
    _add_json_option(fetch)
    fetch.set_defaults(handler=cmd_fetch)

    live = subparsers.add_parser("benchmark-live", help="Benchmark with fresh RPCs from ChainList")
    live.add_argument("network", help="Blockchain network")
    _add_samples_option(live, default=LIVE_BENCHMARK_SAMPLES)
    _add_json_option(live)
    live.set_defaults(handler=cmd_benchmark_live)

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """CLI entry point. Returns the process exit status."""
    parser = build_parser()
    args = parser.parse_args(argv)
    LoggingManager.setup_logging(args.log_level)

    handler: Callable = args.handler
    try:
        return asyncio.run(handler(args))
    except (UnknownNetworkError, EndpointSourceError, ValueError) as e:
        logger.debug(f"Command {args.command} failed", exc_info=True)
        console.print(f"[red]Error: {e}[/red]")
        return 1


if __name__ == "__main__":
    sys.exit(main())
