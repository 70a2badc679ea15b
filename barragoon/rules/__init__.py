"""Rules layer: stride model, barragoon face rules, generators and mutators."""
