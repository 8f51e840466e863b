import severity_summary


def test_summary_of_bundled_table(capsys):
    severity_summary.summarize_fire()
    out = capsys.readouterr().out
    assert out.startswith("Vegetation Fire Severity Summary")
    assert "Vegetation types: 6" in out
    assert "Total burned area: 10,000.0 ha" in out
    assert "Redwood Forest" in out
    assert "Fire-wide severity (% of total fire area)" in out
    for label in ("High:", "Moderate:", "Low:", "Unburned:"):
        assert label in out
    assert "No consistency issues found." in out
