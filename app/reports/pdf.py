# app/reports/pdf.py

import re
from typing import Tuple

from fpdf import FPDF

from app.calculator.schemas import CalculatorOutput
from app.leads.schemas import LeadContact

# -------------------------------------------------------------------
# Palette (RGB)
# -------------------------------------------------------------------
NAVY: Tuple[int, int, int] = (30, 58, 95)
GOLD = (184, 134, 11)
GRAY = (107, 114, 128)
GREEN = (5, 150, 105)
PARCHMENT = (245, 240, 230)
CARD = (248, 249, 250)
WHITE = (255, 255, 255)

MIN_FONT_SIZE = 5
ELLIPSIS = "..."

PAGE_W = 210
PAGE_H = 297
MARGIN = 15
CONTENT_W = PAGE_W - MARGIN * 2

DISCLAIMER = (
    "Disclaimer: These estimates are based on user-provided inputs "
    "and are for informational purposes only."
)


def format_currency(value: float) -> str:
    sign = "-" if value < 0 else ""
    return f"{sign}${abs(value):,.0f}"


def format_number(value: float) -> str:
    return f"{value:,.1f}"


def format_payback(months: float) -> str:
    return "< 1" if months < 1 else format_number(months)


def _latin1(text: str) -> str:
    # core PDF fonts only cover latin-1
    return text.encode("latin-1", "replace").decode("latin-1")


def report_filename(company: str) -> str:
    slug = re.sub(r"\s+", "-", company.strip())
    slug = re.sub(r"[^A-Za-z0-9._-]", "", slug) or "Report"
    return f"True-North-ROI-Analysis-{slug}.pdf"


class ROIReport(FPDF):
    """One-page ROI analysis handed over after the lead form."""

    def __init__(self):
        super().__init__(orientation="P", unit="mm", format="A4")
        self.set_auto_page_break(False)
        self.set_margins(MARGIN, MARGIN, MARGIN)

    # --- primitives ---

    def _font(self, size: float, bold: bool = False, color=NAVY):
        self.set_font("helvetica", "B" if bold else "", size)
        self.set_text_color(*color)

    def fit_text(self, text: str, max_width: float, size: float, bold: bool = False,
                 color=NAVY, min_size: float = MIN_FONT_SIZE) -> str:
        """Set a font that makes ``text`` fit ``max_width``; truncate if even min_size is too wide."""
        text = _latin1(text)
        self._font(size, bold, color)
        while size > min_size and self.get_string_width(text) > max_width:
            size = max(size - 0.5, min_size)
            self._font(size, bold, color)

        if self.get_string_width(text) > max_width:
            while text and self.get_string_width(text + ELLIPSIS) > max_width:
                text = text[:-1]
            text += ELLIPSIS
        return text

    def _centered(self, text: str, y: float):
        text = _latin1(text)
        self.text((PAGE_W - self.get_string_width(text)) / 2, y, text)

    def _right(self, text: str, y: float):
        text = _latin1(text)
        self.text(PAGE_W - MARGIN - self.get_string_width(text), y, text)

    def _heading(self, title: str, y: float) -> float:
        self._font(12, bold=True)
        self.text(MARGIN, y, title)
        return y + 6

    # --- sections ---

    def header_band(self, lead: LeadContact) -> float:
        self.set_fill_color(*NAVY)
        self.rect(0, 0, PAGE_W, 40, style="F")

        self._font(16, bold=True, color=WHITE)
        self._centered("TRUE NORTH PMP CONSULTING", 14)
        self._font(11, color=WHITE)
        self._centered("Project Management Process ROI Analysis", 23)
        prepared = self.fit_text(f"Prepared for {lead.first_name} at {lead.company}", CONTENT_W, 9, color=WHITE)
        self._centered(prepared, 32)
        return 48

    def executive_summary(self, result: CalculatorOutput, y: float) -> float:
        y = self._heading("Executive Summary", y)
        inputs = result.inputs
        summary = (
            f"Based on your organization's {inputs.projects_per_year:,.0f} annual projects with an "
            f"average budget of {format_currency(inputs.avg_budget_per_project)}, we have identified "
            f"{format_currency(result.waste_breakdown.total_annual_waste)} in annual project waste. "
            "With True North's Project Management Process Audit, you can recover a guaranteed "
            "minimum of 10% of this waste."
        )
        self._font(9, color=GRAY)
        self.set_xy(MARGIN, y - 3)
        self.multi_cell(CONTENT_W, 4, _latin1(summary))
        return self.get_y() + 6

    def total_waste_box(self, result: CalculatorOutput, y: float) -> float:
        self.set_fill_color(*PARCHMENT)
        self.rect(MARGIN, y, CONTENT_W, 20, style="F")
        self._font(8, color=GRAY)
        self._centered("Total Annual Project Waste", y + 6)
        self._font(18, bold=True)
        self._centered(format_currency(result.waste_breakdown.total_annual_waste), y + 15)
        return y + 26

    def waste_breakdown(self, result: CalculatorOutput, y: float) -> float:
        y = self._heading("Waste Breakdown", y)
        waste = result.waste_breakdown
        items = [
            ("Cost Overruns", waste.cost_overrun_waste, (220, 38, 38), "Budget exceeded"),
            ("Schedule Delays", waste.delay_waste, (245, 158, 11), "Lost revenue & extended labor"),
            ("Major Issues", waste.risk_waste, (124, 58, 237), "Rework & recovery"),
        ]
        for label, value, color, desc in items:
            self.set_fill_color(*color)
            self.rect(MARGIN + 0.5, y + 0.5, 3, 3, style="F")

            self._font(9, bold=True)
            self.text(MARGIN + 7, y + 3, label)
            self._font(7, color=GRAY)
            self.text(MARGIN + 40, y + 3, desc)
            self._font(9, bold=True)
            self._right(format_currency(value), y + 3)
            y += 8
        return y + 4

    def scenario_cards(self, result: CalculatorOutput, y: float) -> float:
        y = self._heading("Potential Savings Scenarios", y)
        cards = [
            ("GUARANTEED", result.scenarios.conservative, GREEN),
            ("TYPICAL", result.scenarios.moderate, GOLD),
            ("OPTIMIZED", result.scenarios.aggressive, NAVY),
        ]
        col_w = (CONTENT_W - 8) / 3

        for index, (badge, scenario, color) in enumerate(cards):
            x = MARGIN + index * (col_w + 4)
            self.set_fill_color(*CARD)
            self.rect(x, y, col_w, 38, style="F")

            self._font(6, bold=True, color=color)
            self.text(x + 4, y + 6, badge)
            self._font(7, color=GRAY)
            self.text(x + 4, y + 11, f"{scenario.percentage:g}% Improvement")
            inner_w = col_w - 8
            lines = [
                (format_currency(scenario.savings), 20, 12, True, NAVY),
                (f"ROI: {format_number(scenario.roi_multiple)}x", 26, 7, False, GRAY),
                (f"Payback: {format_payback(scenario.payback_months)} mo", 31, 7, False, GRAY),
                (f"Net: {format_currency(scenario.net_savings)}", 37, 8, True, GREEN),
            ]
            for text, dy, size, bold, text_color in lines:
                self.text(x + 4, y + dy, self.fit_text(text, inner_w, size, bold, text_color))

        return y + 44

    def input_table(self, result: CalculatorOutput, y: float) -> float:
        y = self._heading("Your Inputs", y)
        inputs = result.inputs
        rows = [
            ("Projects/Year:", f"{inputs.projects_per_year:g}"),
            ("Avg Budget:", format_currency(inputs.avg_budget_per_project)),
            ("Cost Overrun:", f"{inputs.avg_cost_overrun_pct:g}%"),
            ("Schedule Slip:", f"{inputs.avg_schedule_slip_weeks:g} weeks"),
            ("Delay Cost/Week:", format_currency(inputs.cost_per_week_of_delay)),
            ("Issue Probability:", f"{inputs.prob_major_issue_pct:g}%"),
            ("Avg Issue Cost:", format_currency(inputs.avg_cost_per_major_issue)),
            ("Investment:", format_currency(inputs.engagement_cost)),
        ]
        col_w = CONTENT_W / 2 - 2

        for index, (label, value) in enumerate(rows):
            x = MARGIN + (index % 2) * col_w
            row_y = y + (index // 2) * 5
            self._font(8, color=GRAY)
            self.text(x, row_y, label)
            self._font(8, bold=True)
            self.text(x + 32, row_y, value)

        return y + 24

    def call_to_action(self, y: float) -> float:
        self.set_fill_color(*GOLD)
        self.rect(MARGIN, y, CONTENT_W, 28, style="F")
        self._font(12, bold=True, color=WHITE)
        self._centered("Ready to Stop Bleeding Money?", y + 10)
        self._font(9, color=WHITE)
        self._centered("Schedule your Project Management Process Audit today.", y + 18)
        self._centered("$5,000 audit fee is credited toward implementation contracts.", y + 24)
        return y + 34

    def footer_block(self):
        footer_y = PAGE_H - 18
        self.set_draw_color(200, 200, 200)
        self.line(MARGIN, footer_y - 4, PAGE_W - MARGIN, footer_y - 4)

        self._font(9, bold=True)
        self.text(MARGIN, footer_y, "True North PMP Consulting")
        self._font(7, color=GRAY)
        self.text(MARGIN, footer_y + 4, "Richard Broo | richard@truenorthpmp.com")
        self.text(MARGIN, footer_y + 8, "70+ Years of Project Management Excellence")
        self._font(8)
        self._right("www.truenorthpmpconsulting.com", footer_y + 2)

        self._font(6, color=GRAY)
        self._centered(DISCLAIMER, PAGE_H - 5)


def render_roi_report(result: CalculatorOutput, lead: LeadContact) -> bytes:
    """Render the ROI analysis as PDF bytes."""
    pdf = ROIReport()
    pdf.add_page()

    y = pdf.header_band(lead)
    y = pdf.executive_summary(result, y)
    y = pdf.total_waste_box(result, y)
    y = pdf.waste_breakdown(result, y)
    y = pdf.scenario_cards(result, y)
    y = pdf.input_table(result, y)
    pdf.call_to_action(y)
    pdf.footer_block()

    return bytes(pdf.output())
