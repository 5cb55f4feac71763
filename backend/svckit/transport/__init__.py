# Transport package init
"""
svckit: Transport Bindings
=============================

    - http.py:  HTTPServer, decode_json_request, encode_json_response
"""
