"""
どこで: `util` パッケージ。
何を: 設定ファイル読込とエクスポート先パス解決のヘルパ群。
"""
