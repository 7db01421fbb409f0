"""
どこで: `engine.core` サブパッケージ。
何を: 形状生成結果の唯一の表現 `Geometry`（2D ポリライン集合）を提供。
なぜ: 生成（shapes）と描画（外部レンダラ）の境界を単純な配列表現に固定するため。
"""
