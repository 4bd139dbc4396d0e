from api_spec_scanner.extractor.pattern import matches, matches_any


class TestMatches:
    def test_literal_pattern_matches_itself_only(self):
        for p in ["/api/users", "/", "/error", "/a.b/c+d"]:
            assert matches(p, p) is True
            assert matches(p, p + "/x") is False

    def test_double_star_matches_across_segments(self):
        assert matches("/api/**", "/api/v1/users/123") is True
        assert matches("/api/**", "/api/") is True

    def test_single_star_matches_one_segment(self):
        assert matches("/user/*", "/user/1") is True
        assert matches("/user/*", "/user/1/profile") is False

    def test_star_inside_segment(self):
        assert matches("/files/*.json", "/files/report.json") is True
        assert matches("/files/*.json", "/files/report.xml") is False

    def test_no_prefix_matching(self):
        assert matches("/api", "/api/users") is False
        assert matches("/users", "/api/users") is False

    def test_regex_metacharacters_are_literal(self):
        assert matches("/a.c", "/abc") is False
        assert matches("/users/{id}", "/users/{id}") is True


class TestMatchesAny:
    def test_any_of_several(self):
        assert matches_any(["/internal/**", "/error"], "/error") is True
        assert matches_any(["/internal/**", "/error"], "/api") is False

    def test_empty_patterns(self):
        assert matches_any([], "/api") is False
