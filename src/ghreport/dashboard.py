import argparse
import base64
import io

from flask import (
    Flask,
    jsonify,
    render_template_string,
    request,
    send_file,
)

from ghreport.config.settings import get_settings
from ghreport.core.logging import get_logger, setup_logging
from ghreport.services.report import ReportOutcome, generate_report

logger = get_logger(__name__)

app = Flask(__name__)

# HTTP status returned for each failure kind
STATUS_BY_KIND = {
    "extraction": 400,
    "transport": 502,
    "shape": 502,
    "render": 500,
}


INDEX_TEMPLATE = """
<!doctype html>
<html>
<head>
<title>GitHub Profile Report</title>
<style>
  body { font-family: Arial, sans-serif; margin: 20px; }
  h1 { color: #0087b5; }
  h2 { color: #666; border-bottom: 2px solid #ddd; padding-bottom: 5px; }
  .section { margin-bottom: 30px; }
  button, .button { padding: 8px 12px; margin: 5px; cursor: pointer; }
  input[type="text"] { padding: 5px; margin: 5px; width: 360px; }
  .repo-item { padding: 8px; margin: 4px 0; background: #f5f5f5; border-radius: 4px; }
  .success { background: #d4edda; border: 1px solid #c3e6cb; color: #155724; padding: 10px; }
  .error { background: #f8d7da; border: 1px solid #f5c6cb; color: #721c24; padding: 10px; }
</style>
</head>
<body>
<h1>GitHub Profile Report</h1>

<div class="section">
  <form method="post" action="/">
    <input type="text" name="github_url" placeholder="https://github.com/octocat" value="{{ github_url or '' }}">
    <button type="submit">Generate Report</button>
    <button type="reset" onclick="this.form.github_url.value=''">Clear</button>
  </form>
</div>

{% if outcome is not none %}
  {% if outcome.report_generated %}
  <div class="section success">
    Report generated for <strong>{{ outcome.username }}</strong>.
    <a class="button" href="data:application/pdf;base64,{{ pdf_b64 }}" download="{{ outcome.filename }}">Download {{ outcome.filename }}</a>
  </div>
  <div class="section">
    <h2>Repositories ({{ outcome.repositories|length }})</h2>
    {% for repo in outcome.repositories %}
      <div class="repo-item">
        <strong>{{ repo.name }}</strong>
        ({{ repo.language or 'Unknown' }}) &middot;
        {{ repo.stargazers_count }} stars, {{ repo.forks_count }} forks
      </div>
    {% else %}
      <p>No public repositories.</p>
    {% endfor %}
  </div>
  {% else %}
  <div class="section error">{{ outcome.user_message }}</div>
  {% endif %}
{% endif %}
</body>
</html>
"""


def _render_index(outcome: ReportOutcome | None = None, github_url: str | None = None):
    pdf_b64 = None
    if outcome is not None and outcome.pdf_bytes:
        pdf_b64 = base64.b64encode(outcome.pdf_bytes).decode("ascii")
    return render_template_string(
        INDEX_TEMPLATE, outcome=outcome, github_url=github_url, pdf_b64=pdf_b64
    )


@app.route("/", methods=["GET"])
def index():
    return _render_index()


@app.route("/", methods=["POST"])
def submit():
    github_url = request.form.get("github_url", "")
    if not github_url.strip():
        return _render_index()

    outcome = generate_report(github_url)
    status = 200
    if not outcome.report_generated:
        status = STATUS_BY_KIND.get(outcome.error_kind, 500)
    return _render_index(outcome, github_url), status


@app.route("/api/report", methods=["GET"])
def api_report():
    """Generate the report for ?url=... and return it as an attachment."""
    github_url = request.args.get("url", "")
    outcome = generate_report(github_url)

    if not outcome.report_generated:
        return (
            jsonify(
                {
                    "report_generated": False,
                    "error": outcome.user_message,
                    "kind": outcome.error_kind,
                }
            ),
            STATUS_BY_KIND.get(outcome.error_kind, 500),
        )

    return send_file(
        io.BytesIO(outcome.pdf_bytes),
        mimetype="application/pdf",
        as_attachment=True,
        download_name=outcome.filename,
    )


@app.route("/api/health", methods=["GET"])
def api_health():
    return jsonify({"status": "ok"})


def main():
    settings = get_settings()
    parser = argparse.ArgumentParser(description="GitHub profile report dashboard.")
    parser.add_argument("--host", default=settings.dashboard_host)
    parser.add_argument("--port", type=int, default=settings.dashboard_port)
    args = parser.parse_args()

    setup_logging()
    logger.info("Dashboard listening on http://{}:{}", args.host, args.port)
    app.run(host=args.host, port=args.port, debug=False)


if __name__ == "__main__":
    main()
