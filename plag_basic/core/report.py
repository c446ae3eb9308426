"""Report generation module for plagiarism detection results."""

import json
import html
from datetime import datetime
from pathlib import Path
from typing import List

from .detector import DetectionRun, sort_results
from .highlight import project_results
from .types import PlagiarismResult, HighlightedResult, TextSegment
from .log import base_logger

logger = base_logger.getChild('report')


class ReportGenerator:
    """Generates various report formats for plagiarism detection results."""

    def generate_text(self, run: DetectionRun) -> str:
        """
        Generate the plain text report, untrusted section first.

        Args:
            run: DetectionRun object

        Returns:
            Plain text report
        """
        lines = []
        lines.append("\t===== BEGIN UNTRUSTED COMPARISON REPORT (Sorted by decreasing severity) ===== \n")
        for result in sort_results(run.untrusted_results):
            lines.append(f"\n\t REPORT: UNTRUSTED ID {result.owner_id1} vs UNTRUSTED ID {result.owner_id2}")
            lines.extend(self._result_lines(result))
        lines.append("\n\t===== END UNTRUSTED COMPARISON REPORT ===== \n")

        lines.append("\t**** BEGIN TRUSTED COMPARISON REPORT (Sorted by decreasing severity) **** \n")
        for result in sort_results(run.trusted_results):
            lines.append(f"\n\t REPORT: TRUSTED ID {result.owner_id1} vs UNTRUSTED ID {result.owner_id2}")
            lines.extend(self._result_lines(result))
        lines.append("\n\t**** END TRUSTED COMPARISON REPORT **** \n")

        return "\n".join(lines)

    def _result_lines(self, result: PlagiarismResult) -> List[str]:
        if result.equal_fragments:
            return [f"Identical fragment detected: {f1}" for f1, _ in result.matching_fragments]
        return [
            f"Similar fragments detected: {f1}\nVS\n{f2}"
            for f1, f2 in result.matching_fragments
        ]

    def generate_json(self, run: DetectionRun, indent: int = 2) -> str:
        """
        Generate JSON format report with highlighted texts.

        Args:
            run: DetectionRun object
            indent: JSON indentation level

        Returns:
            JSON string
        """
        highlighted = project_results(run.all_results(), run.clean_texts)
        payload = {
            "untrusted_results": [r.model_dump() for r in run.untrusted_results],
            "trusted_results": [r.model_dump() for r in run.trusted_results],
            "highlighted": [h.model_dump() for h in highlighted],
        }
        return json.dumps(payload, ensure_ascii=False, indent=indent)

    def generate_html(self, run: DetectionRun) -> str:
        """
        Generate HTML format report with side-by-side highlighted texts.

        Args:
            run: DetectionRun object

        Returns:
            HTML string
        """
        highlighted = project_results(run.all_results(), run.clean_texts)

        html_content = f"""<!DOCTYPE html>
<html lang="en">
<head>
    <meta charset="UTF-8">
    <meta name="viewport" content="width=device-width, initial-scale=1.0">
    <title>Plagiarism Detection Report</title>
    <style>
        body {{
            font-family: -apple-system, BlinkMacSystemFont, "Segoe UI", Roboto, "Helvetica Neue", Arial, sans-serif;
            line-height: 1.6;
            color: #333;
            max-width: 1200px;
            margin: 0 auto;
            padding: 20px;
            background-color: #f5f5f5;
        }}
        .header {{
            background: linear-gradient(135deg, #667eea 0%, #764ba2 100%);
            color: white;
            padding: 30px;
            border-radius: 10px;
            margin-bottom: 30px;
        }}
        .header h1 {{
            margin: 0 0 10px 0;
        }}
        .result {{
            border-left: 4px solid #667eea;
            padding: 15px;
            margin: 20px 0;
            background: white;
            border-radius: 4px;
            box-shadow: 0 2px 4px rgba(0,0,0,0.1);
        }}
        .result.trusted {{
            border-left-color: #dc3545;
        }}
        .result-header {{
            display: flex;
            justify-content: space-between;
            font-weight: bold;
        }}
        .result-content {{
            display: grid;
            grid-template-columns: 1fr 1fr;
            gap: 20px;
            margin-top: 15px;
        }}
        .text-block h4 {{
            margin: 0 0 10px 0;
            color: #666;
        }}
        .text-content {{
            font-family: "Courier New", monospace;
            font-size: 0.9em;
            word-break: break-word;
        }}
        .text-content b {{
            background: #fff3cd;
        }}
        .no-results {{
            text-align: center;
            padding: 40px;
            color: #666;
        }}
    </style>
</head>
<body>
    <div class="header">
        <h1>Plagiarism Detection Report</h1>
        <p>Generated: {datetime.now().strftime('%Y-%m-%d %H:%M:%S')}</p>
        <p>Untrusted pairs: {len(run.untrusted_results)} | Trusted pairs: {len(run.trusted_results)}</p>
    </div>

    <div class="results">
        {self._generate_results_html(highlighted)}
    </div>
</body>
</html>"""

        return html_content

    def _generate_results_html(self, results: List[HighlightedResult]) -> str:
        """Generate HTML for the results section."""
        if not results:
            return '<div class="no-results">No plagiarism detected</div>'

        html_parts = []
        for i, result in enumerate(results, 1):
            label1 = "Trusted" if result.trusted_owner1 else "Untrusted"
            kind = "identical" if result.equal_fragments else "similar"
            css_class = "result trusted" if result.trusted_owner1 else "result"
            html_parts.append(f"""
            <div class="{css_class}">
                <div class="result-header">
                    <span>#{i}: {html.escape(result.owner_id1)} vs {html.escape(result.owner_id2)}</span>
                    <span>{result.match_count} {kind} fragments</span>
                </div>
                <div class="result-content">
                    <div class="text-block">
                        <h4>{label1}: {html.escape(result.owner_id1)} ({result.text1_plag_percent}%)</h4>
                        <div class="text-content">{self._segments_html(result.text_display1)}</div>
                    </div>
                    <div class="text-block">
                        <h4>Untrusted: {html.escape(result.owner_id2)} ({result.text2_plag_percent}%)</h4>
                        <div class="text-content">{self._segments_html(result.text_display2)}</div>
                    </div>
                </div>
            </div>""")

        return "".join(html_parts)

    def _segments_html(self, segments: List[TextSegment]) -> str:
        parts = []
        for segment in segments:
            text = html.escape(segment.text)
            parts.append(f"<b>{text}</b>" if segment.bold else text)
        return " ".join(parts)

    def save_report(
        self,
        run: DetectionRun,
        output_path: str,
        format: str = "html"
    ) -> Path:
        """
        Save report to file.

        Args:
            run: DetectionRun object
            output_path: Path to save the report
            format: Output format (json, html, text)

        Returns:
            Path the report was written to
        """
        path = Path(output_path)

        if format == "json":
            content = self.generate_json(run)
        elif format == "html":
            content = self.generate_html(run)
        elif format == "text":
            content = self.generate_text(run)
        else:
            raise ValueError(f"Unsupported format: {format}")

        path.parent.mkdir(parents=True, exist_ok=True)
        with open(path, 'w', encoding='utf-8') as f:
            f.write(content)

        logger.info(f"Report saved to {path}")
        return path
