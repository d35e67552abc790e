# Routes package init
"""
Todo API Backend — API Routes Package
=======================================

Route Inventory:
    - todos.py:   GET    /todos            (list all todos)
                  POST   /todos            (create a todo)
                  PUT    /todos/{id}       (update a todo)
                  DELETE /todos            (delete, id as raw JSON body)
                  DELETE /todos/{id}       (delete, id in path)
    - health.py:  GET    /health           (service health check)

Routes stay thin: extract the inputs, await one TodoStore call, return the
result. Errors raised by the store are translated by the global exception
handlers in main.py.
"""
