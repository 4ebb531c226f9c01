from flask import Blueprint, current_app, jsonify
from flask_login import login_required

from ..importer import ProblemImporter
from ..validation import get_payload

extract = Blueprint("extract", __name__, url_prefix="/api")

IMPORTER_KEY = "problem_importer"


def get_importer() -> ProblemImporter:
    return current_app.extensions[IMPORTER_KEY]


@extract.post("/extract-problem")
@login_required
def extract_problem():
    data = get_payload()
    problem = get_importer().import_problem(data.get("url"))
    return jsonify({
        "message": "Problem extracted successfully",
        "problem": problem.to_dict(),
    })
