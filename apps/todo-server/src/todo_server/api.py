from flask import Blueprint, current_app, jsonify, request

from .models import Todo
from .storage import JsonStore

api_bp = Blueprint("api", __name__)

# OPTIONS is not part of the API; let it fall through to the 404 handler
ROUTE_OPTIONS = {"provide_automatic_options": False}

TODO_NOT_FOUND = "Todo not found"
SAVE_FAILED = "Failed to save todo"


def store() -> JsonStore:
    return current_app.extensions["store"]


def payload() -> dict:
    data = request.get_json(force=True, silent=True)
    return data if isinstance(data, dict) else {}


def not_found():
    return jsonify({"message": TODO_NOT_FOUND}), 404


def save_failed():
    return jsonify({"message": SAVE_FAILED}), 500


@api_bp.get("/todos", **ROUTE_OPTIONS)
def list_todos():
    return jsonify([t.to_dict() for t in store().load()]), 200


@api_bp.get("/todos/<tid>", **ROUTE_OPTIONS)
def get_todo(tid):
    s = store()
    todo = s.find(s.load(), tid)
    if not todo:
        return not_found()
    return jsonify(todo.to_dict()), 200


@api_bp.post("/todos", **ROUTE_OPTIONS)
def create_todo():
    todo = Todo.create(payload())
    s = store()
    with s.lock:
        todos = s.load()
        todos.append(todo)
        if not s.save(todos):
            return save_failed()
    current_app.logger.debug("Created todo %s", todo.id)
    return jsonify({"id": todo.id}), 201


@api_bp.put("/todos/<tid>", **ROUTE_OPTIONS)
def update_todo(tid):
    data = payload()
    s = store()
    with s.lock:
        todos = s.load()
        todo = s.find(todos, tid)
        if not todo:
            return not_found()
        todo.replace(data)
        if not s.save(todos):
            return save_failed()
    current_app.logger.debug("Updated todo %s", tid)
    return jsonify(todo.to_dict()), 200


@api_bp.delete("/todos/<tid>", **ROUTE_OPTIONS)
def delete_todo(tid):
    s = store()
    with s.lock:
        todos = s.load()
        todo = s.find(todos, tid)
        if not todo:
            return not_found()
        todos.remove(todo)
        if not s.save(todos):
            return save_failed()
    current_app.logger.debug("Deleted todo %s", tid)
    return jsonify({"message": "Todo deleted"}), 200
