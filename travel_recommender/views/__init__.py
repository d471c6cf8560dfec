"""
Preference form and timeline view.

- form: submit flow (validate, call the endpoint, store, reset)
- timeline: live query over stored recommendations
- html: server-rendered page and timeline fragments
"""
