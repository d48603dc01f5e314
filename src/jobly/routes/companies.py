from flask import Blueprint, jsonify, request

from jobly.company import CompanyRepository
from jobly.company.repository import UPDATABLE_FIELDS
from jobly.routes import parse_filters, require_body

bp = Blueprint("companies", __name__)

company_repo = CompanyRepository()


@bp.route("", methods=["GET"])
def list_companies():
    """List companies, filtered by name, minEmployees and maxEmployees."""
    filters = parse_filters(
        request.args,
        text_keys=["name"],
        int_keys=["minEmployees", "maxEmployees"],
    )
    return jsonify(company_repo.find_all(filters))


@bp.route("", methods=["POST"])
def create_company():
    """Create a new company."""
    data = require_body(
        request.get_json(silent=True),
        required=["handle", "name", "description"],
        allowed=["handle", *UPDATABLE_FIELDS],
    )

    company = company_repo.create(
        handle=data["handle"],
        name=data["name"],
        description=data["description"],
        num_employees=data.get("numEmployees"),
        logo_url=data.get("logoUrl"),
    )

    return jsonify(company), 201


@bp.route("/<handle>", methods=["GET"])
def get_company(handle: str):
    """Get a company and its jobs."""
    return jsonify(company_repo.get(handle))


@bp.route("/<handle>", methods=["PATCH"])
def update_company(handle: str):
    """Partially update a company."""
    data = require_body(request.get_json(silent=True), allowed=UPDATABLE_FIELDS)
    return jsonify(company_repo.update(handle, data))


@bp.route("/<handle>", methods=["DELETE"])
def delete_company(handle: str):
    """Delete a company."""
    company_repo.remove(handle)
    return jsonify({"deleted": handle})
