"""Jinja2 templates and embedded stylesheet for the HTML inspection report."""

from jinja2 import DictLoader, Environment, StrictUndefined
from markupsafe import Markup, escape

from ..utils.formatting import format_currency, format_number

STYLESHEET = """
    * { box-sizing: border-box; }
    body { font-family: Arial, Helvetica, sans-serif; margin: 0; padding: 0; color: #111827; background: #ffffff; }
    h1, h2, h3, h4 { margin: 0 0 8px 0; }
    p { margin: 0 0 8px 0; }

    /* Branded header */
    .header-container { width: 100%; margin: 0 0 40px 0; text-align: center; }
    .branding-bar { display: flex; justify-content: space-between; align-items: flex-start; padding: 28px 48px 12px 0; min-height: 80px; }
    .branding-bar .logo { height: 70px; }
    .contact-block { text-align: right; font-size: 14px; line-height: 1.4; color: #333; }
    .contact-block .company { font-size: 16px; font-weight: 600; letter-spacing: .5px; }
    .contact-block a { color: #333; text-decoration: none; }
    .header-image-container { width: 100%; max-width: 750px; max-height: 500px; margin: 12px auto 30px auto; overflow: hidden; border-radius: 6px; }
    .header-image { width: 100%; max-height: 500px; object-fit: cover; object-position: center; }
    .report-header-content { text-align: center; padding: 20px 0; }
    .header-text { font-size: 36px; font-weight: bold; color: #333; margin: 0 0 20px 0; }
    .report-title { font-size: 28px; font-weight: 600; color: #444; margin: 0 0 10px 0; text-transform: uppercase; }
    .meta-info { font-size: 16px; color: #666; margin-bottom: 10px; }

    /* Traditional header */
    .header-traditional { display: flex; align-items: center; justify-content: space-between; margin: 24px; margin-bottom: 20px; border-bottom: 2px solid #e5e7eb; padding-bottom: 12px; }
    .header-traditional .title { font-size: 24px; font-weight: 700; color: #111827; }
    .header-traditional .meta { color: #6b7280; font-size: 12px; }
    .header-traditional .logo { height: 40px; }

    .content-wrapper { padding: 0 24px; }

    .cover { border: 1px solid #e5e7eb; border-radius: 12px; padding: 16px; margin-bottom: 20px; background: #f8fafc; }
    .cover h2 { font-size: 18px; color: #1f2937; margin: 0 0 12px 0; page-break-after: avoid; break-after: avoid; }
    .cover h3 { font-size: 16px; color: #111827; margin: 16px 0 8px; }
    .cover h4 { font-size: 14px; color: #111827; margin: 12px 0 6px; }
    .cover p, .cover li { font-size: 13px; line-height: 1.5; margin: 0 0 10px 0; color: #374151; }
    .cover ul { margin: 10px 0 14px 18px; padding: 0; }
    .cover hr { border: 0; border-top: 1px solid #e5e7eb; margin: 14px 0; }
    .cover--summary { margin-top: 24px; }
    .cover .cat-red { color: #c00; }
    .cover .cat-orange { color: #e69500; }
    .cover .cat-blue { color: #2d6cdf; }
    .cover .cat-purple { color: #800080; }

    /* Keep a block together on one page */
    .keep-together { page-break-inside: avoid; break-inside: avoid; }

    .importance-badge { display: inline-flex; align-items: center; padding: 2px 8px; border-radius: 9999px; font-size: 0.8rem; font-weight: 700; color: #ffffff; margin-left: 8px; }

    .section-heading { margin: 16px 0 8px; padding-bottom: 6px; border-bottom: 2px solid var(--selected-color, #d63636); page-break-after: avoid; break-after: avoid; }
    .section-heading-text { font-size: 16px; color: var(--selected-color, #d63636); font-weight: 700; }
    .section-heading--main { --selected-color: #111827; border-bottom: none; }

    .content-grid { display: grid; grid-template-columns: 1fr 2fr; gap: 12px; }
    .image-section, .description-section { background: #f8fafc; border: 1px solid #e5e7eb; border-radius: 8px; padding: 12px; }
    .image-title, .description-title { font-size: 14px; font-weight: 700; color: #1f2937; margin-bottom: 8px; }
    .image-container { border-radius: 6px; overflow: hidden; min-height: 160px; background: #fff; display: flex; align-items: center; justify-content: center; }
    .property-image { width: 100%; height: auto; display: block; }
    .image-placeholder { color: #6b7280; border: 2px dashed #cbd5e1; background: #fff; width: 100%; height: 220px; display: flex; align-items: center; justify-content: center; }

    .location-section, .additional-photos, .section { background: #fff; border-left: 3px solid var(--selected-color, #d63636); padding: 8px; border-radius: 4px; }
    .location-section, .additional-photos { margin-top: 8px; }
    .section { margin-bottom: 8px; }
    .section-title { font-size: 14px; font-weight: 700; margin-bottom: 6px; color: #1f2937; }
    .section-content { font-size: 13px; color: #374151; line-height: 1.5; }
    .defect-title { font-weight: 700; font-size: 14px; margin: 0 0 6px 0; color: var(--selected-color, #d63636); }
    .defect-body { font-size: 13px; color: #374151; line-height: 1.6; margin: 0 0 8px 0; }

    .additional-grid { display: flex; flex-wrap: wrap; gap: 8px; }
    .additional-item { width: calc(50% - 4px); max-width: 220px; page-break-inside: avoid; break-inside: avoid; }
    .additional-image { width: 100%; height: auto; border-radius: 6px; object-fit: cover; }
    .additional-caption { text-align: center; font-size: 0.75rem; color: #6b7280; margin-top: 0.25rem; font-weight: 500; }

    .cost-highlight { background: #f8fafc; border: 1px solid var(--selected-color, #d63636); padding: 8px; border-radius: 6px; margin-top: 8px; }
    .total-cost { text-align: center; font-weight: 700; color: var(--selected-color, #d63636); }

    /* Information blocks */
    .information-section { margin: 0.75rem 0 1.5rem; background: #f8fafc; border: 1px solid #cbd5e1; border-radius: 8px; padding: 1.25rem; page-break-inside: auto; break-inside: auto; page-break-before: avoid; break-before: avoid; }
    .info-header { display: flex; align-items: center; margin-bottom: 1rem; padding-bottom: 0.625rem; border-bottom: 2px solid #3b82f6; page-break-after: avoid; break-after: avoid; }
    .info-heading { font-size: 0.95rem; font-weight: 700; letter-spacing: 0.05em; color: #1e40af; margin: 0; text-transform: uppercase; }
    .info-grid { display: grid; grid-template-columns: repeat(3, 1fr); gap: 1rem; page-break-inside: auto; break-inside: auto; }
    .info-grid-item { display: flex; flex-direction: column; gap: 0.5rem; page-break-inside: avoid; break-inside: avoid; orphans: 2; widows: 2; }
    .info-status-label, .info-item-title { font-weight: 700; color: #000000; }
    .info-status-value { margin-left: 0.25rem; font-weight: 400; color: #6b7280; }
    .info-item-comment { margin-left: 0.75rem; font-size: 0.8125rem; color: #4a5568; line-height: 1.4; }
    .info-item-answers { margin-left: 0.25rem; font-size: 0.875rem; color: #6b7280; }
    .info-images { display: flex; flex-wrap: wrap; gap: 0.5rem; margin-top: 0.5rem; page-break-inside: avoid; break-inside: avoid; }
    .info-image { width: 100%; max-width: 200px; max-height: 200px; height: auto; border-radius: 6px; object-fit: cover; page-break-inside: avoid; break-inside: avoid; }
    .info-image-caption { text-align: center; font-size: 0.75rem; color: #6b7280; margin-top: 0.25rem; font-weight: 500; }
    .info-custom-notes { margin-top: 0; page-break-inside: avoid; break-inside: avoid; }
    .info-custom-label { font-size: 0.875rem; font-weight: 600; color: #475569; margin-bottom: 0.5rem; text-transform: uppercase; letter-spacing: 0.025em; page-break-after: avoid; break-after: avoid; }
    .info-custom-text { font-size: 0.875rem; line-height: 1.6; color: #1f2937; }

    .table { width: 100%; border-collapse: collapse; }
    .table th, .table td { border: 1px solid #e5e7eb; padding: 8px; font-size: 12px; text-align: left; }
    .table thead th { background: #f3f4f6; }
    .table .numeric { text-align: right; }
    .table .total-row td { font-weight: 700; background: #f3f4f6; }

    .footer { margin-top: 16px; padding: 0 24px 16px; font-size: 11px; color: #6b7280; }

    /* Never split a single defect across pages */
    .report-section { margin: 24px 0; page-break-inside: avoid; break-inside: avoid; -webkit-region-break-inside: avoid; }
    .content-grid, .image-section, .description-section, .section, .location-section, .image-container, .property-image { page-break-inside: avoid; break-inside: avoid; }
    .table tr, .table thead, .table tbody, .table th, .table td { page-break-inside: avoid; break-inside: avoid; }

    .page-break { page-break-before: always; break-before: page; margin: 0; padding: 0; height: 0; }

    @media print {
      .page-break { page-break-before: always; }
      .report-section, .keep-together { page-break-inside: avoid; }
    }

    @media (max-width: 640px) {
      .content-wrapper { padding: 0 8px; }
      .cover { padding: 12px 8px; }
      .table th, .table td { padding: 6px 5px; font-size: 10px; line-height: 1.3; }
      .content-grid { grid-template-columns: 1fr; }
      .info-grid { grid-template-columns: 1fr; }
    }
"""

MACROS_TEMPLATE = """\
{% macro information_block(block) %}
{% if block.has_content %}
{% set items = block.ordered_items() %}
  <div class="information-section">
    <div class="info-header">
      <h3 class="info-heading">INFORMATION</h3>
    </div>
{% if items %}
    <div class="info-grid"{% if block.custom_text %} style="margin-bottom: 1.5rem;"{% endif %}>
{% for item in items %}
      <div class="info-grid-item">
{% if item.is_status %}
{% set label, value = item.status_parts %}
        <div><span class="info-status-label">{{ label }}:</span>{% if value %} <span class="info-status-value">{{ value }}</span>{% endif %}</div>
{% else %}
        <div class="info-item-title">{{ item.text }}</div>
{% if item.comment %}
        <div class="info-item-comment">{{ item.comment }}</div>
{% endif %}
{% endif %}
{% set answers = block.answers_for(item) %}
{% if answers %}
        <div class="info-item-answers">{{ answers | join(", ") }}</div>
{% endif %}
{% set images = block.images_for(item) %}
{% if images %}
        <div class="info-images">
{% for image in images %}
          <div class="info-image-wrap">
            <img src="{{ image.url }}" alt="Item image" class="info-image" />
{% if image.location %}
            <div class="info-image-caption">{{ image.location }}</div>
{% endif %}
          </div>
{% endfor %}
        </div>
{% endif %}
      </div>
{% endfor %}
    </div>
{% endif %}
{% if block.custom_text %}
    <div class="info-custom-notes"{% if items %} style="border-top: 1px solid #e2e8f0; padding-top: 1rem;"{% endif %}>
      <div class="info-custom-label">Custom Notes</div>
      <div class="info-custom-text">{{ block.custom_text | nl2br }}</div>
    </div>
{% endif %}
  </div>
{% endif %}
{% endmacro %}

{% macro section_heading(number, name) %}
  <div class="section-heading section-heading--main">
    <h2 class="section-heading-text">Section {{ number }} - {{ name }}</h2>
  </div>
{% endmacro %}

{% macro defect_section(entry, hide_pricing) %}
{% set d = entry.defect %}
{% if entry.is_new_section %}
{{ section_heading(entry.number.main, d.section) }}
{% if entry.information_block %}
{{ information_block(entry.information_block) }}
{% endif %}
{% endif %}
  <section class="report-section" style="--selected-color: {{ d.color }};">
    <div class="section-heading" style="--selected-color: {{ d.color }}; border-bottom: 2px solid {{ d.color }};">
      <h2 class="section-heading-text">
        {{ entry.label }} - {{ d.subsection }}
        <span class="importance-badge" style="background-color: {{ d.color }};">{{ entry.severity.value }}</span>
      </h2>
    </div>

    <div class="content-grid">
      <div class="image-section">
        <h3 class="image-title">Visual Evidence</h3>
        <div class="image-container">
{% if d.image %}
          <img src="{{ d.image }}" alt="Defect image" class="property-image" />
{% else %}
          <div class="image-placeholder"><p>No image available</p></div>
{% endif %}
        </div>
        <div class="location-section">
          <h4 class="section-title">Location</h4>
          <p class="section-content">{{ d.location }}</p>
        </div>
{% if d.additional_images %}
        <div class="additional-photos">
          <h4 class="section-title">Additional Location Photos</h4>
          <div class="additional-grid">
{% for photo in d.additional_images %}
            <div class="additional-item">
              <img src="{{ photo.url }}" alt="Additional photo" class="additional-image" />
{% if photo.location %}
              <div class="additional-caption">{{ photo.location }}</div>
{% endif %}
            </div>
{% endfor %}
          </div>
        </div>
{% endif %}
      </div>

      <div class="description-section">
        <h3 class="description-title">Analysis Details</h3>
        <div class="section">
          <h4 class="section-title">Defect</h4>
          <div class="section-content">
{% if entry.text.title %}
            <p class="defect-title" style="color: {{ d.color }};">{{ entry.text.title }}</p>
{% endif %}
{% for paragraph in entry.text.paragraphs %}
            <p class="defect-body">{{ paragraph }}</p>
{% endfor %}
          </div>
        </div>
{% if hide_pricing %}
        <div class="section">
          <h4 class="section-title">Recommendation</h4>
          <div class="section-content">
            <p>{{ d.recommendation }}</p>
          </div>
        </div>
{% else %}
        <div class="section">
          <h4 class="section-title">Estimated Costs</h4>
          <div class="section-content">
            <p>
              <strong>Materials:</strong> {{ d.material_cost | currency }}<br/>
              <strong>Labor:</strong> {{ d.labor_type }} at {{ d.labor_rate | currency }}/hr<br/>
              <strong>Hours:</strong> {{ d.hours_required | number }}<br/>
              <strong>Recommendation:</strong> {{ d.recommendation }}<br/>
              <strong>Total Estimated Cost:</strong> {{ d.total_cost | currency }}
            </p>
          </div>
        </div>
        <div class="cost-highlight">
          <div class="total-cost">Total Estimated Cost: {{ d.total_cost | currency }}</div>
        </div>
{% endif %}
      </div>
    </div>
  </section>
{% if entry.page_break_after %}
  <div class="page-break"></div>
{% endif %}
{% endmacro %}

{% macro defects_table(entries, heading) %}
  <section class="cover cover--summary keep-together">
    <h2>{{ heading }}</h2>
    <table class="table">
      <thead>
        <tr>
          <th style="width:8%;">No.</th>
          <th style="width:32%;">Section</th>
          <th>Defect</th>
        </tr>
      </thead>
      <tbody>
{% for entry in entries %}
        <tr><td>{{ entry.label }}</td><td>{{ entry.defect.section }} - {{ entry.defect.subsection }}</td><td>{{ entry.summary_title }}</td></tr>
{% endfor %}
      </tbody>
    </table>
  </section>
{% endmacro %}
"""

HEADER_TEMPLATE = """\
{% if meta.header_image_url %}
  <div class="header-container">
    <div class="branding-bar">
      <div class="logo-wrap"><img src="{{ logo_src }}" alt="Logo" class="logo" /></div>
      <div class="contact-block">
        <div class="company">{{ settings.company_name }}</div>
        <div>{{ settings.company_phone }}</div>
        <div><a href="mailto:{{ settings.company_email }}">{{ settings.company_email }}</a></div>
        <div><a href="{{ settings.company_website }}" target="_blank">{{ settings.company_website }}</a></div>
      </div>
    </div>
    <div class="header-image-container">
      <img src="{{ meta.header_image_url }}" alt="Property Image" class="header-image" />
    </div>
    <div class="report-header-content">
{% if meta.header_text %}
      <h1 class="header-text">{{ meta.header_text }}</h1>
{% endif %}
      <h2 class="report-title">HOME INSPECTION REPORT</h2>
      <div class="meta-info">{{ meta.company }} • {{ meta.date }}</div>
    </div>
  </div>
{% else %}
  <header class="header-traditional">
    <div>
      <div class="title">{{ meta.title }}</div>
      <div class="meta">{{ meta.subtitle }}{% if meta.company %} • {{ meta.company }}{% endif %} • {{ meta.date }}</div>
    </div>
{% if meta.logo_url %}
    <img src="{{ logo_src }}" alt="Logo" class="logo" />
{% endif %}
  </header>
{% endif %}
"""

LEGAL_TEMPLATE = """\
  <section class="cover cover--section1 keep-together">
    <h2>Section 1 - Inspection Overview &amp; Client Responsibilities</h2>
    <p>This is a visual inspection only. The scope of this inspection is to verify the proper performance of the home's major systems. We do not verify proper design.</p>
    <p>The following items reflect the condition of the home and its systems at the time and date the inspection was performed. Conditions of an occupied home can change after the inspection (e.g., leaks may occur beneath sinks, water may run at toilets, walls or flooring may be damaged during moving, appliances may fail, etc.).</p>
    <p>Furnishings, personal items, and/or systems of the home are not dismantled or moved. A 3–4 hour inspection is not equal to "live-in exposure" and will not discover all concerns. Unless otherwise stated, we will only inspect/comment on the following systems: <em>Electrical, Heating/Cooling, Appliances, Plumbing, Roof and Attic, Exterior, Grounds, and the Foundation</em>.</p>
    <p>This inspection is not a warranty or insurance policy. The limit of liability of {{ settings.company_legal_name }} and its employees does not extend beyond the day the inspection was performed.</p>
    <p>Cosmetic items (e.g., peeling wallpaper, wall scuffs, nail holes, normal wear and tear, etc.) are not part of this inspection. We also do not inspect for fungi, rodents, or insects. If such issues are noted, it is only to bring them to your attention so you can have the proper contractor evaluate further.</p>
    <p>Although every effort is made to inspect all systems, not every defect can be identified. Some areas may be inaccessible or hazardous. The home should be carefully reviewed during your final walk-through to ensure no new concerns have occurred and that requested repairs have been completed.</p>
    <p>Please contact our office immediately at <a href="tel:{{ settings.company_phone }}">{{ settings.company_phone_display }}</a> if you suspect or discover any concerns during the final walk-through.</p>
    <p>Repair recommendations and cost estimates included in this report are approximate, generated from typical labor and material rates in our region. They are not formal quotes and must always be verified by licensed contractors. {{ settings.company_legal_name }} does not guarantee their accuracy.</p>
    <p>We do not provide guaranteed repair methods. Any corrections should be performed by qualified, licensed contractors. Consult your Real Estate Professional, Attorney, or Contractor for further advice regarding responsibility for these repairs.</p>
    <p>While this report may identify products involved in recalls or lawsuits, it is not comprehensive. Identifying all recalled products is not a requirement for {{ settings.jurisdiction }} licensed Home Inspectors.</p>
    <p>This inspection complies with the standards of practice of the State of {{ settings.jurisdiction }} Home Inspectors Licensing Board. Home inspectors are generalists and recommend further review by licensed specialists when needed.</p>
    <p>This inspection report and all information contained within is the sole property of {{ settings.company_legal_name }} and is leased to the clients named in this report. It may not be shared or passed on without consent. Doing so may result in legal action.</p>
  </section>
  <div class="page-break"></div>
  <section class="cover cover--section2 keep-together">
    <h2>Section 2 - Inspection Scope &amp; Limitations</h2>
    <h3>Inspection Categories &amp; Summary</h3>
{% for severity, css_class, description in severity_guide %}
    <h4 class="{{ css_class }}">{{ severity.value }}</h4>
    <p class="{{ css_class }}">{{ description }}</p>
{% endfor %}
    <hr />
    <h3>Important Information &amp; Limitations</h3>
    <p>{{ settings.company_legal_name }} performs all inspections in compliance with the {{ settings.jurisdiction }} Standards of Practice. We inspect readily accessible, visually observable, permanently installed systems and components of the home. This inspection is not technically exhaustive or quantitative.</p>
    <p>Some comments may go beyond the minimum Standards as a courtesy to provide additional detail. Any item noted for repair, replacement, maintenance, or further evaluation should be reviewed by qualified, licensed tradespeople.</p>
    <p>This inspection cannot predict future conditions or reveal hidden or latent defects. The report reflects the home’s condition only at the time of inspection. Weather, occupancy, or use may reveal issues not present at the time.</p>
    <p>This report should be considered alongside the seller’s disclosure, pest inspection report, and contractor evaluations for a complete picture of the home’s condition.</p>
    <hr />
    <h3>Repair Estimates Disclaimer</h3>
    <ul>
      <li>Estimates are not formal quotes.</li>
      <li>They do not account for unique site conditions and may vary depending on contractor, materials, and methods.</li>
      <li>Final pricing must always be obtained through qualified, licensed contractors with on-site evaluation.</li>
      <li>{{ settings.company_legal_name }} does not guarantee the accuracy of estimates or assume responsibility for work performed by outside contractors.</li>
    </ul>
    <hr />
    <h3>Excluded Items</h3>
    <p>The following are not included in this inspection: septic systems, security systems, irrigation systems, pools, hot tubs, wells, sheds, playgrounds, saunas, outdoor lighting, central vacuums, water filters, water softeners, sound or intercom systems, generators, sport courts, sea walls, outbuildings, operating skylights, awnings, exterior BBQ grills, and firepits.</p>
    <hr />
    <h3>Occupied Home Disclaimer</h3>
    <p>If the home was occupied at the time of inspection, some areas may not have been accessible (furniture, personal belongings, etc.). Every effort was made to inspect all accessible areas; however, some issues may not have been visible.</p>
    <p>We recommend using your final walkthrough to verify that no issues were missed and that the property remains in the same condition as at the time of inspection.</p>
  </section>
"""

COST_TABLE_TEMPLATE = """\
  <section class="cover">
    <h2>Total Estimated Cost</h2>
    <table class="table">
      <thead>
        <tr>
          <th>No.</th>
          <th>Defect</th>
          <th class="numeric">Cost ($)</th>
        </tr>
      </thead>
      <tbody>
{% for line in cost_summary.line_items %}
        <tr><td>{{ line.number }}</td><td>{{ line.title }}</td><td class="numeric">{{ line.cost | currency }}</td></tr>
{% endfor %}
        <tr class="total-row"><td colspan="2">Total Estimated Cost</td><td class="numeric">{{ cost_summary.total | currency }}</td></tr>
      </tbody>
    </table>
  </section>
"""

REPORT_TEMPLATE = """\
{% import "macros.html" as m %}
<!DOCTYPE html>
<html lang="en">
<head>
  <meta charset="UTF-8" />
  <meta name="viewport" content="width=device-width, initial-scale=1.0" />
  <title>{{ meta.title }}</title>
  <style>{{ stylesheet }}</style>
</head>
<body>
{% include "header.html" %}
  <div class="content-wrapper">
{% if meta.is_full %}
{% include "legal.html" %}
{{ m.defects_table(entries, "Defects Summary") }}
  <div class="page-break"></div>
{% else %}
{{ m.defects_table(entries, "Inspection Sections") }}
  <div class="page-break"></div>
{% endif %}
{% for entry in entries %}
{{ m.defect_section(entry, meta.hide_pricing) }}
{% endfor %}
{% for section in information_sections %}
{{ m.section_heading(section.number, section.name) }}
{{ m.information_block(section.block) }}
{% endfor %}
  <div class="page-break"></div>
{% if not meta.hide_pricing %}
{% include "cost_table.html" %}
{% endif %}
  </div>
  <footer class="footer">
    {{ settings.footer_text }}{% if meta.company %} • {{ meta.company }}{% endif %}
  </footer>
</body>
</html>
"""


def nl2br(text: str | None) -> Markup:
    """Escape text and turn newlines into ``<br>``."""
    return Markup("<br>").join(escape(text or "").split("\n"))


def create_environment() -> Environment:
    """Build the autoescaping Jinja2 environment holding all report templates."""
    env = Environment(
        loader=DictLoader(
            {
                "report.html": REPORT_TEMPLATE,
                "macros.html": MACROS_TEMPLATE,
                "header.html": HEADER_TEMPLATE,
                "legal.html": LEGAL_TEMPLATE,
                "cost_table.html": COST_TABLE_TEMPLATE,
            }
        ),
        autoescape=True,
        trim_blocks=True,
        lstrip_blocks=True,
        undefined=StrictUndefined,
        keep_trailing_newline=True,
    )
    env.filters["currency"] = format_currency
    env.filters["number"] = format_number
    env.filters["nl2br"] = nl2br
    return env
