"""problemlog: LeetCode の問題と自分の解答を保存する Flask アプリ"""

__version__ = "0.1.0"
