# __init__.py - jobsheet package: form session, sheet writer, API and UI
