from flask import Blueprint, jsonify, request

from jobly.job import JobRepository
from jobly.job.repository import UPDATABLE_FIELDS
from jobly.routes import parse_filters, require_body

bp = Blueprint("jobs", __name__)

job_repo = JobRepository()


@bp.route("", methods=["GET"])
def list_jobs():
    """List jobs, filtered by title, minSalary and hasEquity."""
    filters = parse_filters(
        request.args,
        text_keys=["title"],
        int_keys=["minSalary"],
        bool_keys=["hasEquity"],
    )
    return jsonify(job_repo.find_all(filters))


@bp.route("", methods=["POST"])
def create_job():
    """Create a new job posting."""
    data = require_body(
        request.get_json(silent=True),
        required=["title", "companyHandle"],
        allowed=["companyHandle", *UPDATABLE_FIELDS],
    )

    job = job_repo.create(
        title=data["title"],
        company_handle=data["companyHandle"],
        salary=data.get("salary"),
        equity=data.get("equity"),
    )

    return jsonify(job), 201


@bp.route("/<int:job_id>", methods=["GET"])
def get_job(job_id: int):
    """Get a job and the company that posted it."""
    return jsonify(job_repo.get(job_id))


@bp.route("/<int:job_id>", methods=["PATCH"])
def update_job(job_id: int):
    """Partially update a job."""
    data = require_body(request.get_json(silent=True), allowed=UPDATABLE_FIELDS)
    return jsonify(job_repo.update(job_id, data))


@bp.route("/<int:job_id>", methods=["DELETE"])
def delete_job(job_id: int):
    """Delete a job posting."""
    job_repo.remove(job_id)
    return jsonify({"deleted": job_id})
