"""Image to Prompt - FastAPI hosting layer.

Modules
-------
main
    FastAPI application that mounts the Gradio UI, the health route, and the
    ``main()`` CLI entry point.
models
    Pydantic response models.
"""
