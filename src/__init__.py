"""
ドレイク
"""
