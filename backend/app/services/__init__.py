# Services package init
"""
Todo API Backend — Services Layer
===================================

What:  The TodoStore contract and its implementations.
How:   Routes depend on the abstract TodoStore; FastAPI injects a concrete
       store per request through `get_todo_store`.

Service Inventory:
    - TodoStore (abstract): list / create / update / delete contract
    - TodoService: TodoStore backed by an async SQLAlchemy session
"""
