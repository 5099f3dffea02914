"""Device inventory core.

Modules
───────
  builder   — XML document → DeviceEntry (flattened CommSetting fields)
  catalog   — validation rules, first-error-wins ingestion, list/find queries
  pipeline  — file checks + parse + build in one call
"""
