#!/usr/bin/env python3
"""
Basic monitoring example
Monitors a live page in headless Chromium and prints the resulting report
"""

import asyncio
import sys
import os

# Add parent directory to path for imports
sys.path.append(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from pagewatch import MonitorBuilder
from pagewatch.models import LighthouseMetrics
from pagewatch.pages import BrowserSession
from pagewatch.reporting import ReportPrinter


async def main():
    print("🌿 Basic Page Monitoring Example")
    print("="*50)

    printer = ReportPrinter()

    async with BrowserSession() as session:
        page = await session.open('https://example.com')
        monitor = (MonitorBuilder(page)
                   .thresholds(lcp=2000)
                   .keywords(['example', 'domain', 'documents'])
                   .build())

        # Scores from an external Lighthouse run can ride along with a collect
        await monitor.collect(lighthouse=LighthouseMetrics(seo_score=82, performance_score=95))
        snapshot = await monitor.collect()
        printer.print_snapshot(snapshot)

        for alert in monitor.get_active_alerts():
            if alert.id.startswith('lighthouse-'):
                monitor.resolve_alert(alert.id)

        printer.print_report(monitor.generate_performance_report())

    print("\n✅ Monitoring example completed!")

if __name__ == "__main__":
    asyncio.run(main())
