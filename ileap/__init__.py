"""
iLEAP logistics extension to the PACT product footprint data model.
"""
