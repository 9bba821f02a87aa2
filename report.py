# report.py
"""
PDF export of a daily recommendation plan (see ai_engine.build_daily_plan).
"""
from io import BytesIO

from reportlab.lib import colors
from reportlab.lib.pagesizes import A4
from reportlab.lib.units import mm
from reportlab.lib.utils import simpleSplit
from reportlab.pdfbase import pdfmetrics
from reportlab.pdfbase.cidfonts import UnicodeCIDFont
from reportlab.pdfgen import canvas

from calorie_service import bmi_status
from seasons import get_season_name

# Korean text needs a CID font; the standard 14 fonts only cover Latin-1
FONT = "HYSMyeongJo-Medium"
pdfmetrics.registerFont(UnicodeCIDFont(FONT))

DIFFICULTY_NAMES = {"easy": "쉬움", "medium": "보통", "hard": "어려움"}


def _printable(text):
    # the CID font has no glyphs outside the BMP (emoji)
    return "".join(ch for ch in text if ord(ch) <= 0xFFFF).strip()


def render_plan_pdf(user, plan, today=None):
    """Return a BytesIO holding the plan as an A4 PDF."""
    buffer = BytesIO()
    c = canvas.Canvas(buffer, pagesize=A4)
    width, height = A4

    margin_x = 25 * mm
    margin_y = 25 * mm
    header_height = 32

    # HEADER BAR
    c.setFillColorRGB(0.09, 0.45, 0.20)
    c.rect(0, height - header_height - 10, width, header_height + 10, stroke=0, fill=1)
    c.setFillColorRGB(0.15, 0.65, 0.35)
    c.rect(0, height - header_height, width, header_height, stroke=0, fill=1)

    c.setFillColor(colors.white)
    c.setFont(FONT, 15)
    c.drawString(margin_x, height - header_height + 8, "Healthy Diary")
    c.setFont(FONT, 11)
    c.drawRightString(width - margin_x, height - header_height + 8, "오늘의 맞춤 추천")

    y = height - header_height - 24

    # USER SUMMARY
    c.setFillColor(colors.black)
    c.setFont(FONT, 11)
    name = user.get("name", "") if user else ""
    c.drawString(margin_x, y, f"사용자: {name}")
    y -= 16

    c.setFont(FONT, 9.5)
    if plan.get("bmi") is not None:
        c.drawString(
            margin_x, y,
            f"BMI: {plan['bmi']} ({bmi_status(plan['bmi'])})     "
            f"BMR: {plan['bmr']} kcal/일     TDEE: {plan['tdee']} kcal/일",
        )
        y -= 13
    if plan.get("calories_target") is not None:
        c.drawString(margin_x, y, f"목표 섭취 칼로리: {plan['calories_target']} kcal/일")
        y -= 13
    place = "실내" if plan.get("indoor") else "실외"
    c.drawString(margin_x, y, f"계절: {get_season_name(plan['season'])}     운동 장소: {place}")
    y -= 18

    c.setStrokeColorRGB(0.8, 0.9, 0.85)
    c.line(margin_x, y, width - margin_x, y)
    y -= 18

    def section(title, y):
        if y < margin_y + 80:
            c.showPage()
            y = height - margin_y
        c.setFont(FONT, 11.5)
        c.setFillColorRGB(0.11, 0.50, 0.27)
        c.drawString(margin_x, y, title)
        c.setFillColor(colors.black)
        return y - 16

    def line(text, y, indent=0, size=9):
        for chunk in simpleSplit(_printable(text), FONT, size, width - 2 * margin_x - indent):
            if y < 40:
                c.showPage()
                y = height - margin_y
            c.setFont(FONT, size)
            c.drawString(margin_x + indent, y, chunk)
            y -= 13
        return y

    # DIET
    y = section("식단 추천", y)
    for item in plan.get("diet", []):
        y = line(f"{item['title']}  ·  {item['calories']}kcal  ·  "
                 f"{DIFFICULTY_NAMES.get(item['difficulty'], item['difficulty'])}", y, size=10)
        nutrients = item.get("nutrients") or {}
        y = line(f"단백질 {nutrients.get('protein', 0)}g  탄수화물 {nutrients.get('carbs', 0)}g  "
                 f"지방 {nutrients.get('fat', 0)}g", y, indent=8)
        if item.get("ingredients"):
            y = line("재료: " + ", ".join(item["ingredients"]), y, indent=8)
        for i, step in enumerate(item.get("cooking_steps") or [], start=1):
            y = line(f"{i}. {step}", y, indent=8)
        y -= 6
    y -= 8

    # EXERCISE
    y = section("운동 추천", y)
    for item in plan.get("exercise", []):
        y = line(f"{item['title']}  ·  {item['duration']}분  ·  약 {item['calories']}kcal 소모", y, size=10)
        if item.get("description"):
            y = line(item["description"], y, indent=8)
        y -= 6
    y -= 8

    # ADVICE
    y = section("조언", y)
    for tip in plan.get("advice", []):
        y = line(f"- {tip}", y)

    c.setFont(FONT, 8)
    c.setFillColorRGB(0.45, 0.5, 0.6)
    footer = "Healthy Diary에서 생성됨"
    if today:
        footer += f" · {today.isoformat()}"
    c.drawString(margin_x, 18, footer)

    c.showPage()
    c.save()

    buffer.seek(0)
    return buffer
