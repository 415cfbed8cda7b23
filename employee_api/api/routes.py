import logging

import pymongo
from bson.errors import InvalidId
from bson.objectid import ObjectId
from flask import Blueprint, jsonify, request
from pydantic import ValidationError
from pymongo.errors import PyMongoError

from employee_api.extensions.db import REQUEST_TIMEOUT, get_collection
from employee_api.models.employee import EmployeeIn, to_json

api = Blueprint("api", __name__)


def _text(message, status):
    return message, status, {"Content-Type": "text/plain; charset=utf-8"}


@api.errorhandler(PyMongoError)
def database_error(e):
    # Timeouts, connectivity and query failures all end up here.
    logging.exception("Database operation failed")
    return _text(str(e), 500)


@api.route("/health", methods=["GET"])
def health_check():
    """Liveness probe for the HR service; answers without a MongoDB round-trip."""
    return jsonify({"status": "ok"}), 200


@api.route("/employee", methods=["GET"])
def list_employees():
    coll = get_collection()
    with pymongo.timeout(REQUEST_TIMEOUT):
        docs = list(coll.find({}))
    return jsonify([to_json(d) for d in docs]), 200


@api.route("/employee", methods=["POST"])
def create_employee():
    try:
        employee = EmployeeIn.model_validate_json(request.get_data())
    except ValidationError as e:
        return _text(str(e), 400)

    coll = get_collection()
    # insert and read-back share one deadline
    with pymongo.timeout(REQUEST_TIMEOUT):
        result = coll.insert_one(employee.to_document())
        created = coll.find_one({"_id": result.inserted_id})

    if created is None:
        return _text("created employee could not be read back", 500)
    return jsonify(to_json(created)), 201


@api.route("/employee/<string:id>", methods=["PUT"])
def edit_employee(id):
    try:
        oid = ObjectId(id)
    except InvalidId as e:
        return _text(str(e), 400)

    try:
        employee = EmployeeIn.model_validate_json(request.get_data())
    except ValidationError as e:
        return _text(str(e), 400)

    update = {"$set": employee.to_document()}
    with pymongo.timeout(REQUEST_TIMEOUT):
        matched = get_collection().find_one_and_update({"_id": oid}, update)

    # A missing record is reported as a client error, not a 404.
    if matched is None:
        return _text("employee not found", 400)

    return jsonify({"id": id, **employee.to_document()}), 200


@api.route("/employee/<string:id>", methods=["DELETE"])
def delete_employee(id):
    try:
        oid = ObjectId(id)
    except InvalidId as e:
        return _text(str(e), 400)

    with pymongo.timeout(REQUEST_TIMEOUT):
        result = get_collection().delete_one({"_id": oid})

    if result.deleted_count < 1:
        return _text("Not Found", 404)
    return jsonify("record deleted"), 200
