#!/usr/bin/env python3
"""
Pagewatch
Performance and SEO monitoring for a single web page
"""

import argparse
import asyncio
import sys
from pagewatch import LogManager, MonitorBuilder
from pagewatch.pages import BrowserSession, PageLoader, StaticPageContext
from pagewatch.reporting import ReportPrinter


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Monitor Core Web Vitals and on-page SEO of a URL")
    parser.add_argument('url', help="Page to monitor")
    parser.add_argument('--runs', type=int, default=1, help="Number of collection cycles")
    parser.add_argument('--interval', type=float, default=5.0, help="Seconds between cycles")
    parser.add_argument('--browser', action='store_true',
                        help="Measure in headless Chromium instead of fetching static HTML")
    parser.add_argument('--timeout', type=float, default=1.0, help="Bound on one vitals measurement")
    parser.add_argument('--log-level', default='INFO')
    parser.add_argument('--log-dir', default=None, help="Also write log files to this directory")
    return parser.parse_args(argv)


async def run_cycles(monitor, runs: int, interval: float, printer: ReportPrinter):
    for run in range(runs):
        snapshot = await monitor.collect()
        printer.print_snapshot(snapshot)
        if run < runs - 1:
            await asyncio.sleep(interval)

    printer.print_report(monitor.generate_performance_report())


async def main(argv=None) -> int:
    """Main entry point for the monitor"""
    args = parse_args(argv)
    LogManager(log_dir=args.log_dir, log_level=args.log_level)
    printer = ReportPrinter()

    if args.browser:
        async with BrowserSession() as session:
            page = await session.open(args.url)
            monitor = MonitorBuilder(page).measurement_timeout(args.timeout).build()
            await run_cycles(monitor, args.runs, args.interval, printer)
        return 0

    result = await PageLoader().fetch(args.url)
    if not result.ok:
        print(f"❌ Could not load {args.url}: {result.error}")
        return 1

    page = StaticPageContext.from_fetch_result(result)
    monitor = MonitorBuilder(page).measurement_timeout(args.timeout).build()
    await run_cycles(monitor, args.runs, args.interval, printer)
    return 0


if __name__ == "__main__":
    try:
        sys.exit(asyncio.run(main()))
    except KeyboardInterrupt:
        print("\n🛑 Monitoring stopped by user")
