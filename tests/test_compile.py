
def test_compile():
    # Modules import in dependency order without cycles
    import geodatum.helmert
    import geodatum.registry
    import geodatum.cartesian
    import geodatum.projection
    import geodatum.locations
    import geodatum

    assert geodatum.__all__
    assert geodatum.__version__
