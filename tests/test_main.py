import main


def test_parse_args_collects_simulation_options():
    args = main.parse_args(["--birds", "50", "--separation", "12.5", "--seed", "3"])
    assert main.simulation_options(args) == {"birds": 50, "separation": 12.5, "seed": 3}
    assert not args.headless


def test_headless_run(capsys):
    main.main(["--headless", "--resolution", "3", "--frames", "5", "--seed", "1"])
    out = capsys.readouterr().out
    assert "[Starlings] Starting with 9 birds" in out
    assert "[Headless] 5 frames" in out
    assert "[Starlings] Stopped after 5 frames" in out
