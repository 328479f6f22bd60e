from datetime import datetime
from ..models import MonitoringSnapshot, PerformanceReport


class ReportPrinter:
    """Prints snapshots and performance reports to the console"""

    def __init__(self, width: int = 60):
        self.width = width

    def print_snapshot(self, snapshot: MonitoringSnapshot):
        """Print one collected snapshot with its alerts"""
        vitals = snapshot.core_web_vitals
        seo = snapshot.seo_metrics

        print(f"\n{'='*self.width}")
        print(f"📊 SNAPSHOT - {snapshot.url} - {snapshot.timestamp.strftime('%H:%M:%S')}")
        print(f"{'='*self.width}")

        print(f"⚡ Core Web Vitals:")
        print(f"  LCP: {vitals.lcp:.0f} ms")
        print(f"  FID: {vitals.fid:.0f} ms")
        print(f"  CLS: {vitals.cls:.3f}")
        print(f"  FCP: {vitals.fcp:.0f} ms")
        print(f"  TTFB: {vitals.ttfb:.0f} ms")

        print(f"\n🔎 On-page SEO:")
        print(f"  Title: {seo.page_title or '(missing)'}")
        print(f"  Description: {seo.meta_description or '(missing)'}")
        print(f"  Headings: {seo.h1_count} H1, {seo.h2_count} H2")
        print(f"  Images with alt: {seo.images_with_alt}/{seo.image_count}")
        print(f"  Links: {seo.internal_links} internal, {seo.external_links} external")
        print(f"  Words: {seo.word_count}")
        print(f"  Structured data: {'yes' if seo.structured_data_present else 'no'}")
        print(f"  Canonical: {seo.canonical_url or '-'}")

        if snapshot.alerts:
            print(f"\n🚨 Alerts:")
            for alert in snapshot.alerts:
                print(f"  [{alert.type.value}] {alert.message}")

    def print_report(self, report: PerformanceReport):
        """Print a performance report"""
        summary = report.summary

        print(f"\n{'='*self.width}")
        print(f"📈 PERFORMANCE REPORT - {datetime.now().strftime('%H:%M:%S')}")
        print(f"{'='*self.width}")

        print(f"  Pages monitored: {summary.total_pages}")
        print(f"  Average LCP: {summary.average_lcp:.0f} ms {self._rating(report, 'lcp')}")
        print(f"  Average FID: {summary.average_fid:.0f} ms {self._rating(report, 'fid')}")
        print(f"  Average CLS: {summary.average_cls:.3f} {self._rating(report, 'cls')}")
        print(f"  Active alerts: {summary.active_alerts}")

        if report.recommendations:
            print(f"\n💡 Recommendations:")
            for recommendation in report.recommendations:
                print(f"  - {recommendation}")

    @staticmethod
    def _rating(report: PerformanceReport, name: str) -> str:
        rating = report.ratings.get(name)
        return f"({rating})" if rating else ""
