from kthancestor import AncestorIndexSession, IndexPolicy, TreeNode


def main():
    chart = TreeNode.from_literal(
        ["ceo",
            ["cto",
                ["eng-director", ["eng-manager", ["engineer-1"], ["engineer-2"]]],
                ["infra-lead", ["sre-1"]]],
            ["cfo", ["controller", ["accountant"]]]]
    )

    # Shallow chart, so a small stride keeps jumps useful
    session = AncestorIndexSession.build(chart, IndexPolicy.recommended(chart.height()))
    print("stride:", session.stride)

    for person, levels in [("engineer-1", 1), ("engineer-1", 3), ("accountant", 3), ("sre-1", 5)]:
        boss = session.kth_parent(person, levels)
        print(f"{levels} level(s) above {person}: {boss if boss is not None else 'nobody'}")

    print(session.explain("engineer-2", 4))


if __name__ == "__main__":
    main()
